"""
Base class and registry for output renderers.

All renderers implement the same interface: a pure function from a batch
of records plus RenderOptions to text. This keeps every format testable
with plain string assertions and lets the conversion facade dispatch on a
format tag alone.
"""

import abc as _abc
import logging as _logging
import typing as _typing

import logconverter.config.types as config_types
import logconverter.core.errors as errors
import logconverter.core.types as core_types

_logger = _logging.getLogger(__name__)


class Renderer(_abc.ABC):
    """
    Abstract base class for all output renderers.

    Renderers must not keep state between calls; the registry shares one
    instance per format.
    """

    name: _typing.ClassVar[str]
    """Format tag, e.g. "html"."""

    extension: _typing.ClassVar[str]
    """Conventional file suffix for this format (with dot)."""

    media_type: _typing.ClassVar[str]
    """MIME type of the rendered text."""

    aliases: _typing.ClassVar[tuple[str, ...]] = ()
    """Extra tags accepted by get_renderer()."""

    @_abc.abstractmethod
    def render(
        self,
        records: _typing.Sequence[core_types.Record],
        options: config_types.RenderOptions,
    ) -> str:
        """
        Render a batch of records.

        Args:
            records: Records in output order.
            options: Presentation switches; irrelevant ones are ignored.

        Returns:
            The complete document text.
        """
        ...


_RENDERERS: dict[str, Renderer] = {}
_BY_TAG: dict[str, Renderer] = {}

RendererT = _typing.TypeVar("RendererT", bound=type[Renderer])


def register_renderer(renderer_class: RendererT) -> RendererT:
    """Class decorator that registers a renderer by name and aliases."""
    renderer = renderer_class()
    if renderer.name in _RENDERERS:
        _logger.warning("Renderer %r already registered, overwriting", renderer.name)

    _RENDERERS[renderer.name] = renderer
    for tag in (renderer.name, *renderer.aliases):
        _BY_TAG[tag.lower()] = renderer

    _logger.debug("Registered renderer: %s", renderer.name)
    return renderer_class


def get_renderer(format_tag: str) -> Renderer:
    """
    Look up a renderer by format tag (case-insensitive).

    Raises:
        UnsupportedOutputFormatError: If no renderer handles the tag.
    """
    renderer = _BY_TAG.get(format_tag.strip().lower().lstrip("."))
    if renderer is None:
        raise errors.UnsupportedOutputFormatError(format_tag)
    return renderer


def available_renderers() -> list[Renderer]:
    """All registered renderers, in registration order."""
    return list(_RENDERERS.values())
