import pytest

from form_assist.errors import FieldResolutionError
from form_assist.form_detection import discover_forms
from form_assist.path_codec import ControlPath, decode_path, encode_path, resolve_path


def test_encode_path_format() -> None:
    assert encode_path("form", 0, "input", 3) == "form[0]-input[3]"
    assert encode_path("div", 2, "select", 1) == "div[2]-select[1]"


def test_decode_path_parses_both_segments() -> None:
    assert decode_path("div[12]-textarea[4]") == ControlPath("div", 12, "textarea", 4)


def test_decode_path_normalizes_case() -> None:
    assert decode_path("FORM[1]-Select[0]") == ControlPath("form", 1, "select", 0)


def test_control_path_str_round_trips() -> None:
    assert str(decode_path("form[0]-input[7]")) == "form[0]-input[7]"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "form[0]",
        "form[0]-input",
        "form[0]-input[1]-input[2]",
        "form[-1]-input[0]",
        "form[a]-input[0]",
        "section[0]-input[0]",
        "form[0]-button[0]",
        " form[0]-input[0]",
        "form[0]_input[0]",
    ],
)
def test_decode_path_rejects_malformed(text: str) -> None:
    assert decode_path(text) is None


def test_resolve_path_returns_discovered_control(load_html) -> None:
    page = load_html(
        """
        <form>
          <input id="hidden-token" type="hidden" name="token">
          <input id="first" name="first">
          <select id="colour"><option>Red</option></select>
          <input id="second" name="second">
          <textarea id="notes"></textarea>
        </form>
        <form>
          <input id="other" name="other">
        </form>
        """
    )
    groups = discover_forms(page)
    descriptors = [element for group in groups for element in group.elements]

    assert len(descriptors) == 5
    for descriptor in descriptors:
        handle = resolve_path(page, descriptor.path)
        assert handle.evaluate("el => el.id") == descriptor.dom_id


def test_resolve_path_out_of_range_container(load_html) -> None:
    page = load_html("<form><input></form>")
    with pytest.raises(FieldResolutionError) as excinfo:
        resolve_path(page, "form[1]-input[0]")
    assert "form index 1 out of range" in str(excinfo.value)


def test_resolve_path_out_of_range_element(load_html) -> None:
    page = load_html("<form><input><input></form>")
    with pytest.raises(FieldResolutionError):
        resolve_path(page, "form[0]-input[2]")


def test_resolve_path_rejects_malformed(load_html) -> None:
    page = load_html("<form><input></form>")
    with pytest.raises(FieldResolutionError):
        resolve_path(page, "form0-input0")


def test_paths_are_positional_snapshots(load_html) -> None:
    page = load_html('<form><input id="a"><input id="b"></form>')
    path = discover_forms(page)[0].elements[1].path
    assert path == "form[0]-input[1]"

    page.evaluate(
        """() => {
          const extra = document.createElement('input');
          extra.id = 'inserted';
          document.querySelector('form').prepend(extra);
        }"""
    )
    # The address now points at what used to be the first input.
    assert resolve_path(page, path).evaluate("el => el.id") == "a"
