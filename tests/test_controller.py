# =============================================================================
# Analysis Controller Tests
# =============================================================================
# End-to-end flows through the orchestration layer with a fake classifier.
# =============================================================================

import asyncio
import json

import pytest

from spamscope.analysis import EXAMPLES, READ_ERROR_MESSAGE, TEXT_ERROR_MESSAGE
from spamscope.core import AnalysisStatus, InputMode

from conftest import SPAM_TEXT


def test_prize_winner_scenario(controller, fake_classifier, clipboard):
    controller.set_text_content(SPAM_TEXT)
    asyncio.run(controller.analyze())

    view = controller.view()
    assert view.character_count == len(SPAM_TEXT)
    assert view.word_count == len(SPAM_TEXT.split())
    assert [(p.name, p.value) for p in view.probability_series] == [
        ("SPAM", 97.2),
        ("HAM", pytest.approx(2.8)),
    ]

    path = controller.export_result()
    record = json.loads(path.read_text(encoding="utf-8"))
    assert record["message"] == SPAM_TEXT[:100] + "..."
    assert record["prediction"] == "spam"
    assert record["spam_keywords"] == ["congratulations", "won", "urgent"]

    assert controller.copy_summary().startswith("Result: SPAM\n")
    assert len(clipboard) == 1


def test_empty_text_makes_no_request(controller, fake_classifier):
    controller.set_text_content("")
    outcome = asyncio.run(controller.analyze())

    assert outcome.status is AnalysisStatus.IDLE
    assert fake_classifier.text_calls == []


def test_editing_after_success_resets_before_next_request(controller, fake_classifier):
    controller.set_text_content(SPAM_TEXT)
    asyncio.run(controller.analyze())
    assert controller.view().status is AnalysisStatus.SUCCEEDED

    controller.set_text_content(SPAM_TEXT + " more")

    view = controller.view()
    assert view.status is AnalysisStatus.IDLE
    assert view.result is None
    assert len(fake_classifier.text_calls) == 1


def test_loading_example_resets_text_result(controller):
    controller.set_text_content("something else")
    asyncio.run(controller.analyze())

    controller.load_example(2)

    assert controller.session.text_content == EXAMPLES[2].text
    assert controller.view().status is AnalysisStatus.IDLE


def test_editing_during_request_drops_stale_response(controller, fake_classifier):
    async def scenario():
        fake_classifier.gate = asyncio.Event()
        controller.set_text_content("first")
        task = asyncio.create_task(controller.analyze())
        await asyncio.sleep(0)

        controller.set_text_content("second")
        fake_classifier.gate.set()
        await task

    asyncio.run(scenario())
    assert controller.view().status is AnalysisStatus.IDLE


def test_edit_during_request_waits_for_it_to_settle(controller, fake_classifier):
    async def scenario():
        fake_classifier.gate = asyncio.Event()
        controller.set_text_content("first")
        task = asyncio.create_task(controller.analyze())
        await asyncio.sleep(0)

        controller.set_text_content("second")
        view = controller.view()
        assert view.status is AnalysisStatus.IDLE
        assert not view.can_analyze

        # Still one request on the wire for this mode
        await controller.analyze()
        assert fake_classifier.text_calls == ["first"]

        fake_classifier.gate.set()
        await task
        assert controller.view().can_analyze

        await controller.analyze()

    asyncio.run(scenario())
    assert fake_classifier.text_calls == ["first", "second"]
    assert controller.view().status is AnalysisStatus.SUCCEEDED


def test_text_failure_is_shown_for_text_mode_only(controller, fake_classifier, http_failure):
    fake_classifier.text_result = http_failure
    controller.set_text_content("hello")
    asyncio.run(controller.analyze())

    assert controller.view().error_message == TEXT_ERROR_MESSAGE

    controller.set_mode(InputMode.FILE)
    assert controller.view().error_message is None

    controller.set_mode(InputMode.TEXT)
    assert controller.view().error_message == TEXT_ERROR_MESSAGE


def test_file_flow(controller, fake_classifier, temp_dir):
    path = temp_dir / "mail.eml"
    path.write_text("Subject: meeting\n\nSee you at 10.", encoding="utf-8")

    async def scenario():
        controller.set_mode(InputMode.FILE)
        controller.select_file(path)
        assert controller.view().content == ""
        await asyncio.sleep(0.01)
        assert controller.view().content.startswith("Subject: meeting")
        await controller.analyze()

    asyncio.run(scenario())

    view = controller.view()
    assert view.selected_file_name == "mail.eml"
    assert view.word_count == 6
    assert view.result.prediction.value == "ham"
    assert fake_classifier.file_calls == [path]


def test_failed_read_keeps_file_and_reports_read_error(controller, temp_dir):
    missing = temp_dir / "missing.eml"

    async def scenario():
        controller.set_mode(InputMode.FILE)
        controller.select_file(missing)
        await asyncio.sleep(0.01)

    asyncio.run(scenario())

    assert controller.session.selected_file is not None
    assert controller.session.selected_file.text is None

    view = controller.view()
    assert view.read_error == READ_ERROR_MESSAGE
    assert view.error_message is None
    assert view.status is AnalysisStatus.IDLE


def test_reselecting_file_keeps_only_latest_text(controller, temp_dir):
    first = temp_dir / "first.txt"
    second = temp_dir / "second.txt"
    first.write_text("first body", encoding="utf-8")
    second.write_text("second body", encoding="utf-8")

    async def scenario():
        controller.set_mode(InputMode.FILE)
        controller.select_file(first)
        controller.select_file(second)
        await asyncio.sleep(0.01)

    asyncio.run(scenario())
    assert controller.view().content == "second body"
    assert controller.view().selected_file_name == "second.txt"


def test_selecting_file_resets_file_outcome(controller, temp_dir):
    path = temp_dir / "mail.txt"
    path.write_text("body", encoding="utf-8")

    async def scenario():
        controller.set_mode(InputMode.FILE)
        controller.select_file(path)
        await controller.analyze()
        assert controller.view().status is AnalysisStatus.SUCCEEDED

        controller.select_file(path)
        assert controller.view().status is AnalysisStatus.IDLE
        await asyncio.sleep(0.01)

    asyncio.run(scenario())


def test_mode_switch_keeps_results(controller, temp_dir):
    path = temp_dir / "mail.txt"
    path.write_text("body", encoding="utf-8")

    async def scenario():
        controller.set_text_content(SPAM_TEXT)
        await controller.analyze()
        controller.set_mode(InputMode.FILE)
        controller.select_file(path)
        await controller.analyze()

    asyncio.run(scenario())

    assert controller.view().result.prediction.value == "ham"
    controller.set_mode(InputMode.TEXT)
    assert controller.view().result.prediction.value == "spam"


def test_actions_are_noops_without_result(controller, clipboard, temp_dir):
    controller.set_text_content("not analyzed")

    assert controller.copy_summary() is None
    assert controller.export_result() is None
    assert clipboard == []
    assert list(temp_dir.iterdir()) == []


def test_on_change_fires_for_async_completions(controller, temp_dir):
    path = temp_dir / "mail.txt"
    path.write_text("body", encoding="utf-8")
    calls = []
    controller.on_change = lambda: calls.append(controller.view().content)

    async def scenario():
        controller.set_mode(InputMode.FILE)
        controller.select_file(path)
        await asyncio.sleep(0.01)

    asyncio.run(scenario())
    # mode switch, file selected, read completed
    assert calls == ["", "", "body"]
