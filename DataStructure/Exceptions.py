class StackError(Exception):
    """Error base de las estructuras de pila."""


class EmptyStackError(StackError, IndexError):
    """
    Se intentó leer o extraer el tope de una pila vacía.
    Hereda de IndexError para conservar el contrato de list.pop().
    """
