class NumberNode:
    def __init__(self, value): self.value = value

    def __repr__(self):
        return f"NumberNode({self.value!r})"

class UnaryOpNode:
    """Single-argument function call."""
    def __init__(self, op, operand):
        self.op = op
        self.operand = operand

    def __repr__(self):
        return f"UnaryOpNode({self.op!r}, {self.operand!r})"

class BinaryOpNode:
    """Arithmetic operator, or a function called with two arguments."""
    def __init__(self, left, op, right):
        self.left = left
        self.op = op
        self.right = right

    def __repr__(self):
        return f"BinaryOpNode({self.left!r}, {self.op!r}, {self.right!r})"
