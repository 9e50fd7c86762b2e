class FakeExecutor:
    """Records every statement and answers with canned rows or an error."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    async def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]
