import logging
import os


class DemanglerConfig(object):

    # note to self: always change this in setup.py as well
    VERSION = "0.3.0"
    CONFIG_FILE_PATH = str(os.path.abspath(__file__))
    PROJECT_ROOT = str(os.path.abspath(os.sep.join([CONFIG_FILE_PATH, "..", ".."])))

    ### logging
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)-15s: %(name)-32s - %(message)s"

    ### demangling
    # maximum nesting of grammar productions, guards against adversarial inputs
    MAX_RECURSION_DEPTH = 256
    # return the mangled input unchanged instead of None when demangling fails
    PASSTHROUGH = False
