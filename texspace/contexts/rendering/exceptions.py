"""Exceptions for the rendering context."""


class CompilationError(Exception):
    """
    The LaTeX engine failed to produce a PDF.

    Attributes:
        result: CompilationResult carrying errors and engine output
    """

    def __init__(self, document_key: str, result):
        self.document_key = document_key
        self.result = result
        summary = result.errors[0] if result.errors else "no PDF was produced"
        super().__init__(
            f"compilation of {document_key} failed with {len(result.errors)} errors: {summary}"
        )
