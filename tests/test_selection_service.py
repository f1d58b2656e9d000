"""
Tests for QuestionarySelector: the checkbox prompt is mocked, never rendered.
"""
import os
import sys
from unittest import mock
import pytest
from filededup.core.models import File, DuplicateGroup
from filededup.services.selection_service import QuestionarySelector, SELECT_PROMPT


@pytest.fixture
def group():
    return DuplicateGroup(
        fingerprint=b"\x01" * 8,
        files=[File(path="/a.bin", size=2000), File(path="/b.bin", size=2000)],
    )


class TestQuestionarySelector:
    def test_offers_every_member_path(self, group):
        with mock.patch("filededup.services.selection_service.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.return_value = ["/b.bin"]

            selected = QuestionarySelector().select(group)

        assert checkbox.call_args.args == (SELECT_PROMPT,)
        choices = checkbox.call_args.kwargs["choices"]
        assert [c.value for c in choices] == ["/a.bin", "/b.bin"]
        assert [c.title for c in choices] == ["/a.bin", "/b.bin"]
        assert selected == ["/b.bin"]

    @pytest.mark.skipif(sys.platform == "win32", reason="Byte file names are POSIX only")
    def test_undecodable_path_gets_printable_title(self):
        raw_path = os.fsdecode(b"/data/\xff_a.bin")
        group = DuplicateGroup(
            fingerprint=b"\x02" * 8,
            files=[File(path=raw_path, size=2000), File(path="/data/b.bin", size=2000)],
        )
        with mock.patch("filededup.services.selection_service.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.return_value = [raw_path]

            selected = QuestionarySelector().select(group)

        first = checkbox.call_args.kwargs["choices"][0]
        assert first.title == "/data/\ufffd_a.bin"
        assert first.value == raw_path
        assert selected == [raw_path]

    def test_nothing_selected(self, group):
        with mock.patch("filededup.services.selection_service.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.return_value = []
            assert QuestionarySelector().select(group) == []

    def test_missing_answer_raises(self, group):
        with mock.patch("filededup.services.selection_service.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.return_value = None
            with pytest.raises(RuntimeError):
                QuestionarySelector().select(group)

    def test_ctrl_c_propagates(self, group):
        with mock.patch("filededup.services.selection_service.questionary.checkbox") as checkbox:
            checkbox.return_value.unsafe_ask.side_effect = KeyboardInterrupt
            with pytest.raises(KeyboardInterrupt):
                QuestionarySelector().select(group)
