import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from DataStructure.Exceptions import EmptyStackError

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class StackNode(Generic[T]):
    """Nodo para lista simplemente enlazada"""

    def __init__(self, data: T, next: "Optional[StackNode[T]]" = None):
        self.data = data
        self.next = next


def _matches(a, b) -> bool:
    """None solo coincide con None; el resto compara por valor."""
    if a is None:
        return b is None
    return a == b


class StackIterator(Generic[T]):
    """
    Recorre la pila del tope al fondo.
    Guarda el nodo tope al crearse; no detecta modificaciones posteriores.
    """

    def __init__(self, node: Optional[StackNode[T]]):
        self._current = node

    def has_next(self) -> bool:
        return self._current is not None

    def __iter__(self) -> "StackIterator[T]":
        return self

    def __next__(self) -> T:
        if self._current is None:
            raise StopIteration
        item = self._current.data
        self._current = self._current.next
        return item


class Stack(Generic[T]):
    """
    Pila (LIFO) genérica sobre una lista simplemente enlazada.
    Acepta None como elemento; se muestra como 'null'.

    Complejidad: O(1) push/pop/peek, O(n) búsqueda, copia y reversa
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._top: Optional[StackNode[T]] = None
        self._size = 0

        if items is not None:
            for item in items:
                self.push(item)

    def push(self, item: T) -> None:
        """Agrega item al tope de la pila"""
        self._top = StackNode(item, self._top)
        self._size += 1

    def top(self) -> T:
        """Extrae y retorna el item del tope"""
        if self.is_empty():
            raise EmptyStackError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    pop = top

    def peek(self) -> T:
        """Retorna el item del tope sin extraerlo"""
        if self.is_empty():
            raise EmptyStackError("peek from empty stack")
        return self._top.data

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return self._size == 0

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return self._size

    def clear(self):
        """Limpia la pila"""
        LOGGER.debug("clearing stack of %d elements", self._size)
        self._top = None
        self._size = 0

    def contains(self, item: T) -> bool:
        """Búsqueda lineal del tope al fondo"""
        for element in self:
            if _matches(item, element):
                return True
        return False

    def pop_all(self, action: Callable[[T], object]):
        """
        Extrae todos los elementos aplicando action a cada uno, del tope al
        fondo. Si action lanza una excepción, la pila queda parcialmente
        vaciada.
        """
        LOGGER.debug("draining stack of %d elements", self._size)
        while not self.is_empty():
            action(self.top())

    def to_list(self) -> List[T]:
        """Convierte a lista Python, del tope al fondo"""
        result = []
        current = self._top
        while current:
            result.append(current.data)
            current = current.next
        return result

    def clone(self) -> "Stack[T]":
        """
        Copia superficial: nodos nuevos en el mismo orden, mismos valores.
        """
        cloned = Stack()
        tail = None
        current = self._top
        while current:
            node = StackNode(current.data)
            if tail is None:
                cloned._top = node
            else:
                tail.next = node
            tail = node
            current = current.next
        cloned._size = self._size
        return cloned

    def __copy__(self) -> "Stack[T]":
        return self.clone()

    def reverse(self):
        """Invierte la pila en sitio reenlazando los nodos"""
        LOGGER.debug("reversing stack of %d elements", self._size)
        prev = None
        current = self._top
        while current:
            nxt = current.next
            current.next = prev
            prev = current
            current = nxt
        self._top = prev

    def __iter__(self) -> Iterator[T]:
        return StackIterator(self._top)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __contains__(self, item) -> bool:
        return self.contains(item)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Stack):
            return NotImplemented
        if self._size != other._size:
            return False
        for a, b in zip(self, other):
            if not _matches(a, b):
                return False
        return True

    def __hash__(self) -> int:
        h = 1
        for item in self:
            h = (31 * h + (0 if item is None else hash(item))) & 0xFFFFFFFF
        return h

    def __str__(self) -> str:
        rendered = ("null" if item is None else str(item) for item in self)
        return f"Stack: [{', '.join(rendered)}]"

    def __repr__(self) -> str:
        return f"Stack({self.to_list()[::-1]!r})"
