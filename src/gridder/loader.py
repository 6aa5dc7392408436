"""YAML loader for layout documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import LayoutError
from .placement import Gridder, Placement

logger = logging.getLogger(__name__)


@dataclass
class LayoutDocument:
    """A parsed layout document.

    Attributes:
        name: Document name
        gridder: Gridder holding the defaults and the parsed layout
        placements: Region name -> Placement, in layout order
    """

    name: str
    gridder: Gridder
    placements: dict[str, Placement] = field(default_factory=dict)


class LayoutLoader:
    """Loads layout documents from YAML files.

    YAML format:
    ```yaml
    name: login_form
    defaults: anchor w insets* 2      # string, or list of strings/numbers
    layout: |
      {title   +     +    }
      {user:fh pass:fh ok }
    regions:
      title: anchor center            # string, or list of strings/numbers
      ok: [anchor, e, px, 4]
    ```
    """

    def load(self, path: str | Path) -> LayoutDocument:
        """Load a layout document from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            LayoutDocument with every region placed
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("loaded layout document %s", path)
        return self._build_document(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> LayoutDocument:
        """Load a layout document from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            LayoutDocument with every region placed
        """
        data = yaml.safe_load(yaml_string)
        return self._build_document(data, default_name="layout")

    def _build_document(self, data: Any, default_name: str) -> LayoutDocument:
        """Build a document from parsed YAML data."""
        if not isinstance(data, dict):
            raise LayoutError("Layout document must be a mapping")
        if "layout" not in data:
            raise LayoutError("Layout document has no 'layout' entry")

        name = data.get("name", default_name)
        gridder = Gridder(*_as_list(data.get("defaults")))
        gridder.parse_layout(str(data["layout"]))

        regions = data.get("regions") or {}
        if not isinstance(regions, dict):
            raise LayoutError("'regions' must map region names to constraints")

        placements = gridder.placements({str(key): value for key, value in regions.items()})
        return LayoutDocument(name=name, gridder=gridder, placements=placements)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
