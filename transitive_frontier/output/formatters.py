"""
Render frontier reports as TOML, JSON, YAML or HTML.
"""
import json
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import tomli_w
import yaml
from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from transitive_frontier.models import FrontierReport
from transitive_frontier.utils.exceptions import UnsupportedFormatError

logger = logging.getLogger(__name__)

HTML_TEMPLATE = "frontier.html.j2"


def to_toml(report: FrontierReport) -> str:
    return tomli_w.dumps(report.to_dict())


def to_json(report: FrontierReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def to_yaml(report: FrontierReport) -> str:
    return yaml.safe_dump(report.to_dict(), sort_keys=False, default_flow_style=False)


def _html_environment() -> Environment:
    return Environment(
        loader=PackageLoader("transitive_frontier.output", "templates"),
        autoescape=select_autoescape(["html", "j2"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def to_html(report: FrontierReport) -> str:
    template = _html_environment().get_template(HTML_TEMPLATE)
    title = f"workspace frontier for transitive dependencies on {report.target_display}"
    return template.render(
        title=title,
        target=report.target_display,
        frontier=report.frontier,
    )


RENDERERS: Dict[str, Callable[[FrontierReport], str]] = {
    "toml": to_toml,
    "json": to_json,
    "yaml": to_yaml,
    "html": to_html,
}

SUPPORTED_FORMATS = tuple(RENDERERS)


def render(report: FrontierReport, fmt: str = "toml") -> str:
    """Render ``report`` in ``fmt``."""
    try:
        renderer = RENDERERS[fmt.lower()]
    except KeyError:
        raise UnsupportedFormatError(fmt, SUPPORTED_FORMATS) from None
    return renderer(report)


def write_report(content: str, output_file: Optional[str] = None) -> Optional[str]:
    """Write rendered content to ``output_file``, or stdout when None."""
    if output_file is None:
        print(content)
        return None

    path = Path(output_file)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")
    logger.info(f"Report written to {path}")
    return str(path)
