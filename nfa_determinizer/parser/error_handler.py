# nfa_determinizer/parser/error_handler.py


class ParseError(Exception):
    """Raised when an automaton table cannot be read"""
    def __init__(self, message: str, row: int = 0, column: int = 0):
        self.message = message
        self.row = row
        self.column = column
        super().__init__(f"Parse error at row {row}, column {column}: {message}")
