import re

from app.core.errors import InvalidIdentifier

# Drivers cannot bind identifiers, so this grammar is the only thing
# standing between request paths and the SQL text.
IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate(name) -> bool:
    """Return True when ``name`` is a plain unquoted SQL identifier."""
    return isinstance(name, str) and IDENTIFIER_RE.fullmatch(name) is not None


def qualified_name(schema: str, obj: str) -> str:
    """
    Build ``schema.obj`` for splicing into SQL text.

    This is the only place where caller-supplied names are concatenated
    into a statement.

    Raises:
        InvalidIdentifier: if either name fails the grammar.
    """
    if not validate(schema) or not validate(obj):
        raise InvalidIdentifier("Nome de schema ou objeto inválido")
    return f"{schema}.{obj}"
