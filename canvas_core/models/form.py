"""Page definition of the wizard (read-only, supplied at startup)."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from canvas_core.errors import FormDefinitionError

SUMMARY_LABEL = "Resumen"


@dataclass(frozen=True)
class FormItem:
    """Single question of a page."""
    area: str = ""
    question: str = ""
    help: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> 'FormItem':
        return cls(
            area=str(data.get('area', '')),
            question=str(data.get('question', '')),
            help=str(data.get('help', '')),
        )


@dataclass(frozen=True)
class FormPage:
    """Page of the wizard: a title and its ordered questions."""
    title: str = ""
    items: List[FormItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'FormPage':
        items = data.get('items') or []
        if not isinstance(items, list):
            raise FormDefinitionError(f"'items' of page {data.get('title')!r} must be a list")
        return cls(
            title=str(data.get('title', '')),
            items=[FormItem.from_dict(item) for item in items if isinstance(item, dict)],
        )


@dataclass(frozen=True)
class FormDefinition:
    """
    Ordered pages of the canvas.

    The last step index (== page_count) is the summary view, it has no
    page of its own.
    """
    pages: List[FormPage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'FormDefinition':
        if not isinstance(data, dict) or not isinstance(data.get('pages'), list):
            raise FormDefinitionError("form definition needs a 'pages' list")
        return cls(pages=[FormPage.from_dict(p) for p in data['pages'] if isinstance(p, dict)])

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'FormDefinition':
        """Reads the pages document from disk."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except OSError as e:
            raise FormDefinitionError(f"cannot read {path}: {e}") from e
        except ValueError as e:
            raise FormDefinitionError(f"{path} is not valid JSON: {e}") from e
        return cls.from_dict(data)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def step_labels(self) -> List[str]:
        """Page titles followed by the summary label."""
        return [page.title for page in self.pages] + [SUMMARY_LABEL]
