#!/usr/bin/python

import logging

import lief

from sndemangle.Demangler import Demangler
from .AbstractLabelProvider import AbstractLabelProvider

lief.logging.disable()
LOGGER = logging.getLogger(__name__)


class ScalaNativeSymbolProvider(AbstractLabelProvider):
    """Resolver for Scala Native function symbols in ELF, Mach-O and PE files"""

    def __init__(self, config):
        self._config = config
        self._demangler = Demangler(config)
        # addr:func_name
        self._func_symbols = {}

    def isSymbolProvider(self):
        return True

    def update(self, binary_info):
        self._func_symbols = {}
        try:
            data = binary_info.getData()
        except OSError as exc:
            LOGGER.debug("Failed to read binary from path %s: %s", binary_info.file_path, exc)
            return
        binary_format = binary_info.getFormat()
        if not binary_format:
            return
        if not self.is_scala_native_binary(binary_info):
            LOGGER.debug("No Scala Native runtime found in %s binary.", binary_format)
            return
        try:
            lief_binary = lief.parse(data)
        except Exception as exc:
            LOGGER.debug("Failed to parse %s binary with LIEF: %s", binary_format, type(exc).__name__)
            return
        if not lief_binary:
            LOGGER.debug("LIEF was not able to parse %s binary.", binary_format)
            return
        if binary_format == "elf":
            self._func_symbols.update(self._parse_elf_symbols(lief_binary.symtab_symbols))
            self._func_symbols.update(self._parse_elf_symbols(lief_binary.dynamic_symbols))
        elif binary_format == "macho":
            self._func_symbols.update(self._parse_macho_symbols(lief_binary.symbols))
        elif binary_format == "pe":
            self._func_symbols.update(self._parse_pe_exports(lief_binary))
        LOGGER.debug("Found %d Scala Native function symbols.", len(self._func_symbols))

    def is_scala_native_binary(self, binary_info):
        """Checks for the Scala Native runtime's signature strings in the binary data."""
        data = binary_info.getData()
        if not data:
            return False
        signatures = [b"scala.scalanative.runtime.", b"scala.scalanative.unsafe."]
        return any(sig in data for sig in signatures)

    def _demangle(self, raw_name):
        if not self._demangler.isScalaNativeSymbol(raw_name):
            return None
        return self._demangler.demangle(raw_name)

    def _parse_elf_symbols(self, symbols):
        function_symbols = {}
        for symbol in symbols:
            if symbol is not None and symbol.is_function and symbol.value != 0:
                demangled = self._demangle(symbol.name)
                if demangled:
                    function_symbols[symbol.value] = demangled
        return function_symbols

    def _parse_macho_symbols(self, symbols):
        # Mach-O symbol tables carry no function flag, rely on the mangling prefix instead
        function_symbols = {}
        for symbol in symbols:
            if symbol is not None and symbol.value != 0:
                demangled = self._demangle(symbol.name)
                if demangled:
                    function_symbols[symbol.value] = demangled
        return function_symbols

    def _parse_pe_exports(self, lief_binary):
        function_symbols = {}
        for function in lief_binary.exported_functions:
            demangled = self._demangle(function.name)
            if demangled:
                function_symbols[lief_binary.imagebase + function.address] = demangled
        return function_symbols

    def getSymbol(self, address):
        return self._func_symbols.get(address, "")

    def getFunctionSymbols(self):
        return self._func_symbols
