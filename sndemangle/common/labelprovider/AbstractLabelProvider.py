#!/usr/bin/python

from abc import abstractmethod


class AbstractLabelProvider:

    def __init__(self, config):
        raise NotImplementedError

    @abstractmethod
    def update(self, binary_info):
        """If the LabelProvider needs to parse from the given target, update() can be used to populate the provider """
        raise NotImplementedError

    @abstractmethod
    def getSymbol(self, address):
        """If the LabelProvider has any information about a demangled Symbol for the given address, return the symbol, else return an empty string"""
        raise NotImplementedError

    @abstractmethod
    def isSymbolProvider(self):
        """Returns whether the getSymbol(..) function of the AbstractLabelProvider is functional"""
        return False

    @abstractmethod
    def getFunctionSymbols(self):
        """Return all function symbol data as address:demangled_name"""
        return {}
