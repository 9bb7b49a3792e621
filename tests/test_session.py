import asyncio
import json

from canvas_core import session as session_module
from canvas_core.drop_zone import BufferedFile, DragEvent, DropZoneController
from canvas_core.errors import SerializationFailure
from canvas_core.models import FormDefinition, StatusKind
from canvas_core.session import (
    MSG_EXPORT_FAILED,
    MSG_EXPORT_OK,
    MSG_IMPORT_FAILED,
    MSG_IMPORT_OK,
    CanvasSession,
)
from canvas_core.status_notifier import StatusNotifier
from tests.conftest import make_form


def new_session(form, scheduler):
    return CanvasSession(form, notifier=StatusNotifier(scheduler))


def test_export_then_reimport_restores_state(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.set_answer("step-0-nombre", "Acme")
    session.go_to(1)
    result = session.export()

    assert result.filename == "busup-canvas.json"
    assert json.loads(result.text)["answers"] == {"step-0-nombre": "Acme"}
    assert session.notifier.current.text == MSG_EXPORT_OK

    fresh = new_session(two_page_form, scheduler)
    assert fresh.import_text(result.content)
    assert fresh.answer_for("step-0-nombre") == "Acme"
    assert fresh.steps.current == 1
    assert fresh.notifier.current.text == MSG_IMPORT_OK


def test_import_replaces_instead_of_merging(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.set_answer("step-1-meta", "vieja")
    session.import_text('{"answers": {"step-0-nombre": "Acme"}}')
    assert session.answers.snapshot() == {"step-0-nombre": "Acme"}
    assert session.steps.current == 0


def test_rejected_import_leaves_state_untouched(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.set_answer("step-0-nombre", "Acme")
    session.go_to(2)

    for raw in ("no es json", '{"currentStep": 1}', "[]"):
        assert not session.import_text(raw)
        assert session.answers.snapshot() == {"step-0-nombre": "Acme"}
        assert session.steps.current == 2
        assert session.notifier.current.kind == StatusKind.ERROR
        assert session.notifier.current.text == MSG_IMPORT_FAILED


def test_dropped_file_is_sanitized_and_clamped(three_page_form, scheduler, surface):
    session = new_session(three_page_form, scheduler)
    controller = DropZoneController(surface, session.ingest_file)

    async def scenario():
        with controller:
            content = b'{"answers":{"x":"y","z":42},"currentStep":99}'
            await surface.emit(DragEvent('drop', has_files=True, files=[BufferedFile('c.json', content)]))

    asyncio.run(scenario())
    assert session.answers.snapshot() == {"x": "y"}
    assert session.steps.current == 3
    assert surface.count() == 0


def test_unreadable_file_reports_error(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.set_answer("step-0-nombre", "Acme")
    ok = asyncio.run(session.ingest_file(BufferedFile('x.json', error='NotReadableError')))
    assert not ok
    assert session.answers.snapshot() == {"step-0-nombre": "Acme"}
    assert session.notifier.current.text == MSG_IMPORT_FAILED


def test_overlapping_imports_apply_in_start_order(two_page_form, scheduler):
    class SlowFile:
        name = 'slow.json'

        def __init__(self, text, gate):
            self.text = text
            self.gate = gate

        async def read_text(self):
            await self.gate.wait()
            return self.text

    async def scenario():
        session = new_session(two_page_form, scheduler)
        gate = asyncio.Event()
        first = asyncio.ensure_future(session.ingest_file(
            SlowFile('{"answers": {"a": "primero"}, "currentStep": 1}', gate)
        ))
        await asyncio.sleep(0)
        second = asyncio.ensure_future(session.ingest_file(
            BufferedFile('fast.json', b'{"answers": {"a": "segundo"}, "currentStep": 2}')
        ))
        await asyncio.sleep(0.01)
        # The fast file waits for the slow one instead of racing it
        assert session.answers.get("a") == ""
        gate.set()
        await asyncio.gather(first, second)
        return session

    session = asyncio.run(scenario())
    assert session.answers.snapshot() == {"a": "segundo"}
    assert session.steps.current == 2


def test_next_on_summary_exports(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    assert session.next() is None
    assert session.next() is None
    assert session.steps.is_summary
    result = session.next()
    assert result is not None
    assert json.loads(result.text)["currentStep"] == 2


def test_export_failure_is_reported(two_page_form, scheduler, monkeypatch):
    def broken(*args, **kwargs):
        raise SerializationFailure("boom")

    monkeypatch.setattr(session_module, "export_payload", broken)
    session = new_session(two_page_form, scheduler)
    assert session.export() is None
    assert session.notifier.current.text == MSG_EXPORT_FAILED
    assert session.notifier.current.is_error


def test_page_view_lists_fields_with_answers(scheduler):
    long_help = "x" * 121
    form = make_form(("Inicio", ["Nombre", "¿Qué problema resolvemos?"]))
    session = new_session(form, scheduler)
    session.set_answer("step-0-nombre", "Acme")

    page = session.page_view()
    assert page.title == "Inicio"
    assert page.counter == "Paso 1 de 2"
    assert [f.field_id for f in page.fields] == ["step-0-nombre", "step-0-que-problema-resolvemos"]
    assert page.fields[0].answer == "Acme"
    assert page.fields[0].help_id == "step-0-nombre-help"
    assert page.fields[0].rows == 4

    long_form = FormDefinition.from_dict({
        'pages': [{'title': 'T', 'items': [{'area': 'A', 'question': 'Q', 'help': long_help}]}]
    })
    assert new_session(long_form, scheduler).page_view().fields[0].rows == 6


def test_summary_view_and_nav_state(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.set_answer("step-0-nombre", "Acme")
    session.set_answer("step-1-meta", "   ")
    session.go_to(2)

    assert session.page_view() is None
    blocks = session.summary_view()
    assert [b.title for b in blocks] == ["Inicio", "Metas"]
    assert blocks[0].rows[0].answered and blocks[0].rows[0].answer == "Acme"
    assert not blocks[1].rows[0].answered

    nav = session.nav_state()
    assert nav.progress_percent == 100
    assert nav.primary_label == "Descargar resumen"
    assert nav.can_go_back
    assert [label for _, label, _ in nav.breadcrumbs] == ["Inicio", "Metas", "Resumen"]


def test_close_cancels_status_timer(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.export()
    session.close()
    assert scheduler.pending == []


def test_deeply_nested_file_is_reported_not_raised(two_page_form, scheduler):
    session = new_session(two_page_form, scheduler)
    session.set_answer("step-0-nombre", "Acme")
    content = ('{"answers": {"a": ' + "[" * 100000 + "]" * 100000 + "}}").encode("utf-8")

    ok = asyncio.run(session.ingest_file(BufferedFile('deep.json', content)))

    assert not ok
    assert session.answers.snapshot() == {"step-0-nombre": "Acme"}
    assert session.notifier.current.text == MSG_IMPORT_FAILED
