"""Option tables built from documentation tags and signatures."""

from __future__ import annotations

import inspect
import typing
from typing import TYPE_CHECKING, Any

from ..constants import DOC_INDENT
from .models import MISSING, ActionParameter
from .parsing import attribute_docstrings, extract_doc, parse_param_body, split_type

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .models import DocTag

__all__ = [
    "action_parameters",
    "build_action_options",
    "build_global_options",
    "describe_parameter",
    "format_default",
    "global_option_names",
]

_CONTAINER_TYPES = (list, tuple, dict, set, frozenset)


def action_parameters(handler: Callable[..., Any]) -> list[ActionParameter]:
    """List the parameters of a bound action handler, in declaration order.

    ``*args`` and ``**kwargs`` are reported as optional, defaulting to an
    empty container.
    """
    parameters: list[ActionParameter] = []
    for param in inspect.signature(handler).parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            default: Any = ()
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            default = {}
        elif param.default is inspect.Parameter.empty:
            default = MISSING
        else:
            default = param.default
        parameters.append(ActionParameter(name=param.name, default=default))
    return parameters


def format_default(value: Any) -> str | None:
    """Return the literal rendering of a default value.

    Containers are not rendered and give None.
    """
    if isinstance(value, _CONTAINER_TYPES):
        return None
    return repr(value)


def describe_parameter(parameter: ActionParameter, type_name: str, doc: str) -> str:
    """Compose the option description of a documented parameter.

    E.g., "str, optional (defaults to 'en')." followed by the indented doc lines.
    """
    description = f"{type_name}, " if type_name else ""
    if parameter.required:
        description += "required."
    else:
        literal = format_default(parameter.default)
        description += "optional." if literal is None else f"optional (defaults to {literal})."
    if doc.strip():
        description += "\n" + "\n".join(DOC_INDENT + line for line in doc.split("\n"))
    return description


def build_action_options(parameters: list[ActionParameter], tags: list[DocTag]) -> dict[str, str]:
    """Build the option table of an action.

    The n-th ``@param`` tag documents the n-th parameter, whatever its name.
    Undocumented parameters get an empty description and surplus tags are
    ignored.

    Args:
        parameters: The handler parameters, in declaration order
        tags: The handler documentation tags, in written order

    Returns:
        Dict mapping parameter name to description, sorted by name
    """
    param_tags = [tag for tag in tags if tag.name == "param"]
    options: dict[str, str] = {}
    for parameter, tag in zip(parameters, param_tags):
        type_name, doc = parse_param_body(tag.body, parameter.name)
        options[parameter.name] = describe_parameter(parameter, type_name, doc)
    for parameter in parameters[len(param_tags) :]:
        options[parameter.name] = ""
    return dict(sorted(options.items()))


def _is_class_var(annotation: Any) -> bool:
    """Tell if an annotation (possibly a string) declares a ClassVar."""
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _shared_names(command_class: type) -> set[str]:
    """Names declared as ClassVar anywhere in the class hierarchy."""
    names: set[str] = set()
    for klass in command_class.__mro__:
        for name, annotation in inspect.get_annotations(klass).items():
            if _is_class_var(annotation):
                names.add(name)
    return names


def global_option_names(command_class: type) -> Iterator[str]:
    """Yield the public, non-shared attributes declared by the class itself.

    Inherited attributes, methods, nested classes and ClassVar declarations
    are left out.
    """
    own = vars(command_class)
    shared = _shared_names(command_class)
    seen: set[str] = set()
    for name in [*inspect.get_annotations(command_class), *own]:
        if name in seen or name.startswith("_") or name in shared:
            continue
        seen.add(name)
        value = own.get(name)
        if isinstance(value, (staticmethod, classmethod, type)) or inspect.isfunction(value):
            continue
        yield name


def build_global_options(command_class: type) -> dict[str, str]:
    """Build the global option table of a command class.

    Each option is described by the first ``@var`` or ``@property`` tag of
    its documentation: "<type>, <text>", or just "<type>" without text.

    Args:
        command_class: A Command subclass

    Returns:
        Dict mapping attribute name to description, sorted by name
    """
    docstrings = attribute_docstrings(command_class)
    options: dict[str, str] = {}
    for name in global_option_names(command_class):
        value = vars(command_class).get(name)
        raw = value.__doc__ if isinstance(value, property) else docstrings.get(name)
        tag = extract_doc(raw).find_tag("var", "property")
        if tag is None:
            options[name] = ""
            continue
        type_name, doc = split_type(tag.body)
        options[name] = f"{type_name}, {doc.strip()}" if doc.strip() else type_name
    return dict(sorted(options.items()))
