# tests/test_utils.py
import string

import docx
import pytest

from alphabet import Alphabet
from file_utils import extract_text, extract_text_from_pdf, extract_text_from_txt
from utils import clean_to_alphabet, normalize_name, read_documents

LOWERCASE_ALPHABET = Alphabet(string.ascii_lowercase)


def test_normalize_name():
    assert normalize_name("My Report (1).PDF") == "my_report"
    assert normalize_name("notes ( 12 ).txt") == "notes"
    assert normalize_name("plain.docx") == "plain"


def test_clean_to_alphabet():
    assert clean_to_alphabet("a\tbé☃") == "a be"
    assert clean_to_alphabet("line\r\nnext") == "line\r\nnext"
    assert clean_to_alphabet("Ab c", LOWERCASE_ALPHABET) == "bc"
    assert clean_to_alphabet(None) == ""
    assert clean_to_alphabet("") == ""


def test_extract_text_from_txt_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\n")
    assert extract_text_from_txt(str(path)) == "one\r\ntwo\n"


def test_extract_text_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        extract_text(str(tmp_path / "data.xyz"))


def test_extract_text_from_broken_pdf(tmp_path, capsys):
    path = tmp_path / "broken.pdf"
    path.write_text("not a pdf", encoding="utf-8")
    assert extract_text_from_pdf(str(path)) is None
    assert "PDF Error" in capsys.readouterr().out


def test_read_documents(tmp_path, capsys):
    (tmp_path / "alpha.txt").write_text("alpha text", encoding="utf-8")
    (tmp_path / "empty.txt").write_text("", encoding="utf-8")

    document = docx.Document()
    document.add_paragraph("beta text")
    document.save(str(tmp_path / "Beta (2).docx"))

    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "gamma.txt").write_text("gamma", encoding="utf-8")

    documents = read_documents(str(tmp_path))

    assert sorted(documents) == ["alpha", "beta", "gamma"]
    assert documents["alpha"] == "alpha text"
    assert "beta text" in documents["beta"]
    assert documents["gamma"] == "gamma"
    assert "No readable text for empty" in capsys.readouterr().out


def test_read_documents_prefers_txt(tmp_path):
    (tmp_path / "report.txt").write_text("from txt", encoding="utf-8")
    document = docx.Document()
    document.add_paragraph("from docx")
    document.save(str(tmp_path / "report.docx"))

    assert read_documents(str(tmp_path)) == {"report": "from txt"}
