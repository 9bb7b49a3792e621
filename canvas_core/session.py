"""
Canvas Session - single source of truth of one wizard session.

Facade over AnswerStore + StepController + StatusNotifier. Every
mutation of the answers or the step goes through the methods below, and
every failure of the import/export path ends here as an error banner.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from canvas_core.answer_store import AnswerStore
from canvas_core.drop_zone import DroppedFile
from canvas_core.errors import InvalidFormat, SerializationFailure, UnreadableFile
from canvas_core.field_ids import help_id, make_field_id
from canvas_core.log_utils import tagged
from canvas_core.models import BreadcrumbState, FormDefinition
from canvas_core.payload_codec import DEFAULT_EXPORT_FILENAME, export_payload, import_payload
from canvas_core.status_notifier import StatusNotifier
from canvas_core.step_controller import StepController

_log = tagged("SESSION")

MSG_EXPORT_OK = "Descargaste un archivo con toda la información."
MSG_EXPORT_FAILED = "No se pudo exportar el archivo."
MSG_IMPORT_OK = "Archivo importado correctamente."
MSG_IMPORT_FAILED = "No reconocemos el archivo. Asegúrate de exportarlo desde la app."

LONG_HELP_CHARS = 120


@dataclass(frozen=True)
class ExportResult:
    text: str
    filename: str

    @property
    def content(self) -> bytes:
        return self.text.encode('utf-8')


@dataclass(frozen=True)
class FieldView:
    """One question of the active page, ready for rendering."""
    field_id: str
    help_id: str
    area: str
    question: str
    help: str
    answer: str
    rows: int


@dataclass(frozen=True)
class PageView:
    index: int
    title: str
    counter: str
    fields: List[FieldView]


@dataclass(frozen=True)
class SummaryRow:
    field_id: str
    area: str
    question: str
    answer: str
    answered: bool


@dataclass(frozen=True)
class SummaryBlock:
    title: str
    rows: List[SummaryRow]


@dataclass(frozen=True)
class NavState:
    progress_percent: float
    primary_label: str
    can_go_back: bool
    counter: str
    breadcrumbs: List[Tuple[int, str, BreadcrumbState]]


class CanvasSession:
    """Interaction core of one browser tab."""

    def __init__(
        self,
        form: FormDefinition,
        notifier: Optional[StatusNotifier] = None,
        export_filename: str = DEFAULT_EXPORT_FILENAME,
    ):
        self.form = form
        self.answers = AnswerStore()
        self.steps = StepController(form.page_count)
        self.notifier = notifier or StatusNotifier()
        self.export_filename = export_filename
        self._import_lock = asyncio.Lock()

    # === ANSWERS ===

    def set_answer(self, field_id: str, value: str):
        self.answers.set(field_id, value)

    def answer_for(self, field_id: str) -> str:
        return self.answers.get(field_id)

    # === NAVIGATION ===

    def go_to(self, step: int) -> int:
        return self.steps.go_to(step)

    def next(self) -> Optional[ExportResult]:
        """Next step, or the export document when on the summary."""
        if self.steps.next():
            return self.export()
        return None

    def back(self) -> int:
        return self.steps.back()

    # === EXPORT / IMPORT ===

    def export(self) -> Optional[ExportResult]:
        try:
            text, filename = export_payload(
                self.steps.current, self.answers.snapshot(), filename=self.export_filename
            )
        except SerializationFailure as e:
            _log(f"Export failed: {e}")
            self.notifier.error(MSG_EXPORT_FAILED)
            return None
        _log(f"Exported {len(self.answers)} answer(s) at step {self.steps.current}")
        self.notifier.success(MSG_EXPORT_OK)
        return ExportResult(text=text, filename=filename)

    def import_text(self, raw: Union[str, bytes]) -> bool:
        """Replaces answers and step from an exported document."""
        try:
            answers, step = import_payload(raw, self.form.page_count)
        except InvalidFormat as e:
            _log(f"Import rejected: {e}")
            self.notifier.error(MSG_IMPORT_FAILED)
            return False
        self.answers.replace_all(answers)
        self.steps.go_to(step)
        _log(f"Imported {len(answers)} answer(s), step {step}")
        self.notifier.success(MSG_IMPORT_OK)
        return True

    async def ingest_file(self, file: DroppedFile) -> bool:
        """
        Reads a picked or dropped file and imports it.

        One import at a time: a second file waits for the first one, so
        the file chosen last is the one that stays applied.
        """
        async with self._import_lock:
            try:
                text = await file.read_text()
            except (UnreadableFile, OSError, UnicodeDecodeError) as e:
                _log(f"Cannot read {getattr(file, 'name', '?')}: {e}")
                self.notifier.error(MSG_IMPORT_FAILED)
                return False
            return self.import_text(text)

    # === VIEWS ===

    def page_view(self) -> Optional[PageView]:
        if self.steps.is_summary:
            return None
        index = self.steps.current
        page = self.form.pages[index]
        fields = []
        for item in page.items:
            field_id = make_field_id(index, item.question)
            fields.append(FieldView(
                field_id=field_id,
                help_id=help_id(field_id),
                area=item.area,
                question=item.question,
                help=item.help,
                answer=self.answers.get(field_id),
                rows=6 if len(item.help) > LONG_HELP_CHARS else 4,
            ))
        return PageView(index=index, title=page.title, counter=self.steps.page_counter, fields=fields)

    def summary_view(self) -> List[SummaryBlock]:
        blocks = []
        for page_index, page in enumerate(self.form.pages):
            rows = []
            for item in page.items:
                field_id = make_field_id(page_index, item.question)
                rows.append(SummaryRow(
                    field_id=field_id,
                    area=item.area,
                    question=item.question,
                    answer=self.answers.get(field_id),
                    answered=self.answers.has_answer(field_id),
                ))
            blocks.append(SummaryBlock(title=page.title, rows=rows))
        return blocks

    def nav_state(self) -> NavState:
        return NavState(
            progress_percent=self.steps.progress_percent,
            primary_label=self.steps.primary_label,
            can_go_back=self.steps.can_go_back,
            counter=self.steps.page_counter,
            breadcrumbs=self.steps.breadcrumbs(self.form.step_labels),
        )

    def close(self):
        self.notifier.close()
