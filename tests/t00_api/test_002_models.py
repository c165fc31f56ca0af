"""
Paste record mapping to and from the wire format
"""
import pytest

from refheap.api import Paste, HighlightedPaste, DecodeError

PASTE_JSON = {
    "lines": 1,
    "views": 12,
    "date": "2012-01-04T01:44:22.964Z",
    "paste-id": "1",
    "language": "Clojure",
    "private": False,
    "url": "https://www.refheap.com/1",
    "user": "raynes",
    "contents": "(begin)",
}


def __test_from_dict__():
    paste = Paste.from_dict(PASTE_JSON)
    assert paste == Paste(
        paste_id="1", lines=1, views=12, date="2012-01-04T01:44:22.964Z", language="Clojure",
        private=False, url="https://www.refheap.com/1", user="raynes", contents="(begin)"
    )
    assert paste.to_dict() == PASTE_JSON


def __test_update_overwrites_everything__():
    paste = Paste(paste_id="old", contents="local edit", language="Go", private=True)
    paste.update_from(PASTE_JSON)
    assert paste.paste_id == "1"
    assert paste.contents == "(begin)"
    assert paste.language == "Clojure"
    assert paste.private is False


def __test_update_null_and_missing__():
    """ null resets a field, a missing key leaves it alone """
    paste = Paste(user="someone", contents="keep me")
    paste.update_from({"user": None, "paste-id": "7"})
    assert paste.user == ""
    assert paste.is_anonymous
    assert paste.contents == "keep me"
    assert paste.paste_id == "7"


def __test_update_is_all_or_nothing__():
    paste = Paste(paste_id="1", contents="original")
    with pytest.raises(DecodeError, match="lines"):
        paste.update_from({"contents": "changed", "lines": "many"})
    assert paste == Paste(paste_id="1", contents="original")


@pytest.mark.parametrize("data", [
    {"private": "false"},
    {"views": True},
    {"views": 1.5},
    {"contents": 42},
])
def __test_wrong_types__(data):
    with pytest.raises(DecodeError):
        Paste.from_dict(data)


def __test_highlighted_paste__():
    assert HighlightedPaste.from_dict({"content": "<b>x</b>"}).content == "<b>x</b>"
    assert HighlightedPaste.from_dict({}).content == ""
    with pytest.raises(DecodeError):
        HighlightedPaste.from_dict({"content": ["<b>"]})
