# hackasm/hack_symbols.py
import logging

from hackasm.hack_consts import PREDEFINED_SYMBOLS, VARIABLE_BASE_ADDRESS

logger = logging.getLogger(__name__)


class SymbolTable:
    """
    Ordered name -> address bindings, seeded with the predefined symbols.

    Insertion never overwrites: a repeated name is appended as a second entry
    and lookups keep returning the first binding.
    """

    def __init__(self):
        self.entries = []  # (name, address) pairs in insertion order
        self._first_binding = {}
        self.next_variable_address = VARIABLE_BASE_ADDRESS
        for name, address in PREDEFINED_SYMBOLS:
            self.insert(name, address)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, name):
        return name in self._first_binding

    def insert(self, name, address):
        """Adds a binding. Returns False if the name was already bound (first binding kept)."""
        self.entries.append((name, address))
        if name in self._first_binding:
            logger.debug(f"Symbol '{name}' already bound to {self._first_binding[name]}; keeping first binding")
            return False
        self._first_binding[name] = address
        return True

    def lookup(self, name):
        """Returns the address bound to name, or None if unknown."""
        return self._first_binding.get(name)

    def allocate_variable(self, name):
        """Resolves name, binding it to the next free RAM address on first use."""
        address = self.lookup(name)
        if address is not None:
            return address
        address = self.next_variable_address
        self.insert(name, address)
        self.next_variable_address += 1
        logger.debug(f"Variable '{name}' allocated at address {address}")
        return address

    def as_dict(self):
        return dict(self._first_binding)
