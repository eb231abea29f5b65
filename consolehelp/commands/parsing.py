"""Documentation block and action name parsing utilities."""

from __future__ import annotations

import ast
import inspect
import re
import textwrap

from .models import DocComment, DocTag

__all__ = [
    "attribute_docstrings",
    "camel_to_id",
    "clean_comment",
    "extract_doc",
    "id_to_camel",
    "parse_param_body",
    "split_type",
]

_BLOCK_OPEN = re.compile(r"^\s*/\*+")
_BLOCK_CLOSE = re.compile(r"\*+/\s*$")
# Leading "*" continuation marker and at most one whitespace after it
_LINE_MARKER = re.compile(r"^[ \t]*\*?[ \t]?", re.MULTILINE)
_TAG_START = re.compile(r"^[ \t]*@\w+", re.MULTILINE)
_TAG_SPLIT = re.compile(r"^[ \t]*@", re.MULTILINE)
_PLACEHOLDER = re.compile(r"\$\w+:?")
_UPPERCASE = re.compile(r"(?<![A-Z])[A-Z]")
_SEPARATORS = re.compile(r"[-_]+")


def camel_to_id(name: str, separator: str = "-") -> str:
    """Convert a camel-cased (or snake_cased) name to a lowercase id.

    E.g., "ListAll" -> "list-all", "_list_all" -> "list-all", "index" -> "index"

    Args:
        name: Method name remainder, after the action prefix
        separator: Word separator of the resulting id

    Returns:
        The hyphenated lowercase id
    """
    text = _UPPERCASE.sub(lambda m: separator + m.group(0), name)
    text = _SEPARATORS.sub(separator, text.replace("_", separator))
    return text.strip(separator).lower()


def id_to_camel(name: str) -> str:
    """Convert a hyphenated or snake_cased id to CamelCase.

    E.g., "list-all" -> "ListAll", "foo_command" -> "FooCommand"
    """
    return "".join(part[:1].upper() + part[1:] for part in _SEPARATORS.split(name) if part)


def clean_comment(raw: str | None) -> str:
    """Strip comment decoration from a documentation block.

    Accepts either a delimited block (``/** ... */`` with ``*`` continuation
    markers) or a Python docstring, which is dedented with `inspect.cleandoc`.

    Args:
        raw: The documentation text as written in the source

    Returns:
        The bare text, trimmed, without carriage returns
    """
    if not raw:
        return ""
    text = raw.replace("\r", "")
    if _BLOCK_OPEN.match(text):
        text = _BLOCK_CLOSE.sub("", _BLOCK_OPEN.sub("", text, count=1), count=1)
        text = _LINE_MARKER.sub("", text)
    else:
        text = inspect.cleandoc(text)
    return text.strip()


def extract_doc(raw: str | None) -> DocComment:
    """Split a documentation block into its summary and its tags.

    The summary is everything before the first line starting with an
    ``@word`` tag. Each tag runs until the next line starting with ``@``.

    Args:
        raw: The raw comment block or docstring

    Returns:
        DocComment with the trimmed summary and tags in written order
    """
    text = clean_comment(raw)
    match = _TAG_START.search(text)
    if match is None:
        return DocComment(summary=text)

    doc = DocComment(summary=text[: match.start()].strip())
    for chunk in _TAG_SPLIT.split(text[match.start() :]):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(None, 1)
        doc.tags.append(DocTag(name=parts[0], body=parts[1] if len(parts) > 1 else ""))
    return doc


def split_type(body: str) -> tuple[str, str]:
    """Split a tag body into its leading type token and the remaining text."""
    parts = body.strip().split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def _is_placeholder(token: str, parameter_name: str) -> bool:
    """Tell if `token` names the documented variable rather than describing it."""
    if _PLACEHOLDER.fullmatch(token):
        return True
    return token.rstrip(":") == parameter_name


def parse_param_body(body: str, parameter_name: str) -> tuple[str, str]:
    """Parse the body of a ``@param`` tag.

    Accepts ``<type> [<placeholder>] <description>`` where the placeholder is
    either ``$name`` or the parameter's own name (optionally followed by ":").

    E.g., "list args extra arguments" -> ("list", "extra arguments")

    Args:
        body: The tag body
        parameter_name: Name of the parameter paired with this tag

    Returns:
        Tuple of (type, description)
    """
    type_name, rest = split_type(body)
    if rest:
        tokens = rest.split(None, 1)
        if _is_placeholder(tokens[0], parameter_name):
            rest = tokens[1] if len(tokens) > 1 else ""
    return type_name, rest


def attribute_docstrings(cls: type) -> dict[str, str]:
    """Collect the attribute docstrings written in a class body.

    An attribute docstring is a string literal placed right after an
    assignment, e.g.::

        verbose: bool = False
        \"\"\"@var bool whether to print more details\"\"\"

    Args:
        cls: The class to inspect

    Returns:
        Dict mapping attribute name to its raw docstring (empty if the
        source is not available)
    """
    try:
        source = inspect.getsource(cls)
    except (OSError, TypeError):
        return {}
    try:
        tree = ast.parse(textwrap.dedent(source))
    except SyntaxError:
        return {}

    class_node = next((node for node in tree.body if isinstance(node, ast.ClassDef)), None)
    if class_node is None:
        return {}

    docs: dict[str, str] = {}
    for node, following in zip(class_node.body, class_node.body[1:]):
        if not (isinstance(following, ast.Expr) and isinstance(following.value, ast.Constant) and isinstance(following.value.value, str)):
            continue
        if isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name):
            names = [node.target.id]
        elif isinstance(node, ast.Assign):
            names = [target.id for target in node.targets if isinstance(target, ast.Name)]
        else:
            continue
        for name in names:
            docs[name] = following.value.value
    return docs
