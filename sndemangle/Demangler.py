import logging

from sndemangle.DemanglerConfig import DemanglerConfig
from sndemangle.scala_native import DemangleError, demangle
from sndemangle.scala_native.definitions import SYMBOL_PREFIXES

LOGGER = logging.getLogger(__name__)


class Demangler:
    """Facade around the pure demangling core, applies the configured fallback for failed symbols."""

    def __init__(self, config=None):
        if config is None:
            config = DemanglerConfig()
        self.config = config
        self.num_demangled = 0
        self.num_failed = 0

    def isScalaNativeSymbol(self, name):
        return bool(name) and name.startswith(SYMBOL_PREFIXES)

    def _fallback(self, name):
        return name if self.config.PASSTHROUGH else None

    def demangle(self, name):
        """Return the rendered symbol, or the configured fallback if name is not a valid Scala Native symbol"""
        try:
            demangled = demangle(name, max_depth=self.config.MAX_RECURSION_DEPTH)
        except DemangleError as exc:
            LOGGER.debug("Failed to demangle Scala Native symbol %s: %s", name, exc)
            self.num_failed += 1
            return self._fallback(name)
        self.num_demangled += 1
        return demangled

    def demangleAll(self, names):
        results = {}
        for name in names:
            results[name] = self.demangle(name)
        LOGGER.debug("Demangled %d symbols, %d failed.", self.num_demangled, self.num_failed)
        return results
