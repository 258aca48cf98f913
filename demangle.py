import argparse
import logging
import os
import sys

from sndemangle.DemanglerConfig import DemanglerConfig
from sndemangle.scala_native import DemangleError, demangle


def readIdentifiers(file_path):
    identifiers = []
    with open(file_path, "r") as fin:
        for line in fin:
            line = line.strip()
            if line:
                identifiers.append(line)
    return identifiers


def formatResult(identifier, config):
    try:
        return "{} = {}".format(identifier, demangle(identifier, max_depth=config.MAX_RECURSION_DEPTH))
    except DemangleError as exc:
        logging.debug("demangling failed: %s", exc)
        if config.PASSTHROUGH:
            return "{} = {}".format(identifier, identifier)
        return "{} ERROR {}".format(identifier, exc)


if __name__ == "__main__":
    PARSER = argparse.ArgumentParser(description='Demangle Scala Native identifiers given as arguments or listed in a file, one per line.')
    PARSER.add_argument('-f', '--file', type=str, default='', help='Process a file of mangled identifiers, outputting results inline, separating mangled/unmangled names via " = ".')
    PARSER.add_argument('-p', '--passthrough', action='store_true', default=False, help='Echo identifiers that cannot be demangled instead of reporting an error.')
    PARSER.add_argument('-v', '--verbose', action='store_true', default=False, help='Enable debug logging.')
    PARSER.add_argument('identifiers', type=str, nargs='*', help='Mangled identifiers to demangle.')

    ARGS = PARSER.parse_args()

    if not ARGS.identifiers and not ARGS.file:
        PARSER.print_help()
        sys.exit(1)

    config = DemanglerConfig()
    if ARGS.verbose:
        config.LOG_LEVEL = logging.DEBUG
    if ARGS.passthrough:
        config.PASSTHROUGH = True
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    IDENTIFIERS = list(ARGS.identifiers)
    if ARGS.file:
        if not os.path.isfile(ARGS.file):
            logging.error("Not a file: %s", ARGS.file)
            sys.exit(1)
        IDENTIFIERS.extend(readIdentifiers(ARGS.file))
    for IDENTIFIER in IDENTIFIERS:
        print(formatResult(IDENTIFIER, config))
