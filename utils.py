import os
import re
import unicodedata

from alphabet import DEFAULT_ALPHABET
from file_utils import SUPPORTED_EXTENSIONS, extract_text

# ---------------------- Names ----------------------
def normalize_name(filename):
    base = os.path.splitext(filename)[0]
    base = re.sub(r'\(\s*\d+\s*\)', '', base)
    base = re.sub(r'\s+', '_', base.strip())
    return base.lower()

# ---------------------- Reading ----------------------
def read_documents(folder="data/texts"):
    """
    Extracts every supported document under `folder`.
    Returns {normalized name: text}; when several files share a name the
    first one that yields text wins (.txt, then .pdf, then .docx).
    """
    found = {}
    for root, _, files in os.walk(folder):
        for file in sorted(files):
            ext = os.path.splitext(file)[1].lower()
            if ext in SUPPORTED_EXTENSIONS:
                found.setdefault(normalize_name(file), []).append(os.path.join(root, file))

    documents = {}
    for name in sorted(found):
        paths = sorted(found[name], key=lambda p: SUPPORTED_EXTENSIONS.index(os.path.splitext(p)[1].lower()))
        for path in paths:
            text = extract_text(path)
            if text:
                documents[name] = text
                break
        else:
            print(f"[Warning] No readable text for {name}")
    return documents

# ---------------------- Cleaning ----------------------
def clean_to_alphabet(text: str, alphabet=DEFAULT_ALPHABET) -> str:
    """Maps text onto the search alphabet, dropping anything it cannot hold."""
    if not text or not isinstance(text, str):
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.replace("\t", " ")
    return "".join(ch for ch in text if ch in alphabet)
