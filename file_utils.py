# file_utils.py
# Contains utility functions for reading base text out of documents.

import os

import docx
import pdfplumber

SUPPORTED_EXTENSIONS = (".txt", ".pdf", ".docx")


def extract_text_from_pdf(pdf_file_path):
    """Extracts all text from a PDF file."""
    text = ""
    try:
        with pdfplumber.open(pdf_file_path) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
        return text
    except Exception as e:
        print(f"PDF Error: {pdf_file_path} -> {e}")
        return None


def extract_text_from_docx(docx_file_path):
    """Extracts all paragraph text from a DOCX file."""
    try:
        doc = docx.Document(docx_file_path)
        return "\n".join(para.text for para in doc.paragraphs) + "\n"
    except Exception as e:
        print(f"DOCX Error: {docx_file_path} -> {e}")
        return None


def extract_text_from_txt(txt_file_path):
    try:
        # newline="" keeps \r\n pairs, both symbols belong to the alphabet
        with open(txt_file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return f.read()
    except OSError as e:
        print(f"TXT Error: {txt_file_path} -> {e}")
        return None


def extract_text(file_path):
    """Picks the extractor from the file extension."""
    ext = os.path.splitext(file_path)[1].lower()
    if ext == ".pdf":
        return extract_text_from_pdf(file_path)
    if ext == ".docx":
        return extract_text_from_docx(file_path)
    if ext == ".txt":
        return extract_text_from_txt(file_path)
    raise ValueError(f"Unsupported file type: {ext or file_path}")
