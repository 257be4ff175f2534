from __future__ import annotations

from spatialui.diagnostics.json_codec import dumps_bytes, dumps_text, loads


def test_dumps_handles_tuples_sets_and_sorting() -> None:
    text = dumps_text({"b": (1, 2), "a": {3}}, sort_keys=True)
    assert text == '{"a":[3],"b":[1,2]}'
    assert loads(dumps_bytes({"k": "v"})) == {"k": "v"}


def test_pretty_output_is_indented() -> None:
    assert "\n  " in dumps_text({"a": 1}, pretty=True)
