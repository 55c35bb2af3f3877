from typing import Mapping, Optional

from mc_templater.config import settings
from mc_templater.constants import DIRECTION
from mc_templater.errors import TemplateError
from mc_templater.placement import fill_template
from mc_templater.template import Template, parse
from mc_templater.util.logging import ensure_logging, get_logger
from mc_templater.world import Position, World

from .library import TEMPLATES

logger = get_logger(__name__)


def template_of(name: str, templates: Optional[Mapping[str, str]] = None) -> Template:
    """Parse the named template, falling back to the default template.

    The default is looked up in ``templates`` first and then among the bundled
    templates, so a custom mapping does not have to carry it.
    """
    templates = TEMPLATES if templates is None else templates

    text = templates.get(name)
    if text is None:
        logger.warning(
            "Unknown template, using default",
            template=name,
            default=settings.DEFAULT_TEMPLATE,
        )
        default = settings.DEFAULT_TEMPLATE
        text = templates.get(default, TEMPLATES.get(default))
        if text is None:
            raise TemplateError(f"default template {default!r} is not defined")

    return parse(text)


def fill(
    name: str,
    position,
    direction,
    world: World,
    templates: Optional[Mapping[str, str]] = None,
) -> None:
    ensure_logging()

    position = Position.of(position)
    direction = DIRECTION.parse(direction)

    logger.info(
        "Generating template",
        template=name,
        position=(position.x, position.y, position.z),
        direction=direction.value,
    )

    template = template_of(name, templates)
    fill_template(template, position, direction, world)


__all__ = [
    "TEMPLATES",
    "fill",
    "template_of",
]
