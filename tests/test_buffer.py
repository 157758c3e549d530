from __future__ import annotations

import pytest

from tedit.buffer import Buffer, BufferValidationError, Line


def make_buffer() -> Buffer:
    return Buffer.from_lines(
        ["test", "", "text file", "content"], source_identifier="/some/file.txt"
    )


def assert_indices_contiguous(buffer: Buffer) -> None:
    assert [line.index for line in buffer.lines] == list(range(buffer.line_count))


def data(buffer: Buffer) -> list[str]:
    return [line.data for line in buffer.lines]


def test_status_text_reports_line_count() -> None:
    buffer = make_buffer()

    assert buffer.status_text() == "/some/file.txt, lines: 4"


def test_join_line_with_previous_returns_join_column() -> None:
    buffer = make_buffer()

    offset = buffer.join_line_with_previous(0, 3)

    assert buffer.line_count == 3
    assert buffer.lines[2].data == "text filecontent"
    assert offset == 9
    assert_indices_contiguous(buffer)


def test_join_line_with_previous_on_first_line_is_noop() -> None:
    buffer = make_buffer()

    offset = buffer.join_line_with_previous(2, 0)

    assert offset == 2
    assert data(buffer) == ["test", "", "text file", "content"]
    assert buffer.dirty is False


def test_insert_line_at_start_pushes_line_down() -> None:
    buffer = make_buffer()

    buffer.insert_line(0, 0)

    assert buffer.line_count == 5
    assert buffer.lines[0].data == ""
    assert buffer.lines[1].data == "test"


def test_insert_line_in_middle_of_other_line() -> None:
    buffer = make_buffer()

    buffer.insert_line(1, 0)

    assert buffer.line_count == 5
    assert buffer.lines[0].data == "t"
    assert buffer.lines[1].data == "est"


def test_insert_line_at_end_of_line_adds_empty_line() -> None:
    buffer = make_buffer()

    buffer.insert_line(7, 3)

    assert data(buffer) == ["test", "", "text file", "content", ""]


@pytest.mark.parametrize("line_num", [0, 1, 2, 3])
def test_line_numbers_are_fixed_after_adding_new_line(line_num: int) -> None:
    buffer = make_buffer()

    buffer.insert_line(0, line_num)

    assert buffer.line_count == 5
    assert_indices_contiguous(buffer)


def test_split_line() -> None:
    buffer = make_buffer()

    assert buffer.split_line(3, 3) == ("con", "tent")


@pytest.mark.parametrize(
    ("offset", "expected"),
    [(0, ("", "content")), (7, ("content", ""))],
)
def test_split_line_boundaries_are_identity_splits(
    offset: int, expected: tuple[str, str]
) -> None:
    buffer = make_buffer()

    assert buffer.split_line(offset, 3) == expected
    assert buffer.lines[3].data == "content"


@pytest.mark.parametrize("offset", range(0, len("text file") + 1))
def test_split_then_join_restores_line(offset: int) -> None:
    buffer = make_buffer()

    buffer.insert_line(offset, 2)
    join_at = buffer.join_line_with_previous(0, 3)

    assert join_at == offset
    assert data(buffer) == ["test", "", "text file", "content"]
    assert_indices_contiguous(buffer)


def test_repeated_joins_never_empty_the_buffer() -> None:
    buffer = make_buffer()

    while buffer.line_count > 1:
        buffer.join_line_with_previous(0, buffer.line_count - 1)
    buffer.join_line_with_previous(0, 0)

    assert data(buffer) == ["testtext filecontent"]
    assert_indices_contiguous(buffer)


def test_join_line_with_next() -> None:
    buffer = make_buffer()

    assert buffer.join_line_with_next(2) is True
    assert data(buffer) == ["test", "", "text filecontent"]
    assert buffer.join_line_with_next(2) is False


def test_get_line_is_bounds_checked() -> None:
    buffer = make_buffer()

    assert buffer.get_line(0) == Line("test", 0)
    assert buffer.get_line(3) == Line("content", 3)
    assert buffer.get_line(4) is None
    assert buffer.get_line(-1) is None


def test_insert_char() -> None:
    buffer = make_buffer()

    buffer.insert_char("x", 2, 0)
    buffer.insert_char("!", 0, 1)

    assert buffer.lines[0].data == "texst"
    assert buffer.lines[1].data == "!"


def test_insert_char_rejects_multiple_characters() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.insert_char("ab", 0, 0)


def test_insert_text_rejects_line_terminators() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.insert_text("a\nb", 0, 0)


def test_delete_char_removes_character_before_offset() -> None:
    buffer = make_buffer()

    buffer.delete_char(4, 0)

    assert buffer.lines[0].data == "tes"


def test_delete_char_at_line_start_is_rejected() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError) as info:
        buffer.delete_char(0, 2)

    assert info.value.line_num == 2
    assert info.value.offset == 0


def test_delete_forward_char_removes_character_at_offset() -> None:
    buffer = make_buffer()

    buffer.delete_forward_char(0, 3)

    assert buffer.lines[3].data == "ontent"
    with pytest.raises(BufferValidationError):
        buffer.delete_forward_char(6, 3)


@pytest.mark.parametrize(
    ("offset", "line_num"),
    [(0, 4), (0, -1), (5, 0), (-1, 0), (1, 1)],
)
def test_out_of_range_addresses_raise(offset: int, line_num: int) -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.insert_line(offset, line_num)
    with pytest.raises(BufferValidationError):
        buffer.insert_char("x", offset, line_num)
    assert data(buffer) == ["test", "", "text file", "content"]


def test_join_line_with_previous_rejects_missing_line() -> None:
    buffer = make_buffer()

    with pytest.raises(BufferValidationError):
        buffer.join_line_with_previous(0, 4)


def test_empty_construction_holds_one_empty_line() -> None:
    assert data(Buffer()) == [""]
    assert data(Buffer.from_lines([])) == [""]

    untitled = Buffer.untitled()
    assert untitled.source_identifier == "untitled"
    assert data(untitled) == [""]


def test_mutations_bump_version_and_mark_dirty() -> None:
    buffer = make_buffer()
    assert buffer.version == 0
    assert buffer.dirty is False

    buffer.insert_char("a", 0, 1)
    buffer.insert_line(0, 0)

    assert buffer.version == 2
    assert buffer.dirty is True
    buffer.mark_clean()
    assert buffer.dirty is False


def test_text_and_mirror_reflect_content() -> None:
    buffer = make_buffer()

    mirror = buffer.mirror()

    assert buffer.text() == "test\n\ntext file\ncontent"
    assert mirror.text == buffer.text()
    assert mirror.lines == ("test", "", "text file", "content")
    assert mirror.status == "/some/file.txt, lines: 4"


def test_lines_snapshot_is_detached() -> None:
    buffer = make_buffer()
    snapshot = buffer.lines

    buffer.insert_line(2, 0)

    assert len(snapshot) == 4
    assert snapshot[0] == Line("test", 0)


def test_line_value_matches_data() -> None:
    line = make_buffer().lines[2]

    assert line.value == "text file"
    assert len(line) == 9
