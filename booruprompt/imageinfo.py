"""Extraction of generation prompts from text, PNG, JPEG and WebP files."""

from __future__ import annotations

import io
import os
import struct
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
EXIF_HEADER = b"Exif\x00\x00"


def _read_bytes(path: PathLike) -> bytes | None:
    try:
        return Path(path).read_bytes()
    except OSError:
        return None


def read_text_file(path: PathLike) -> str:
    """Return a text file's lines, each ending in a newline; "" if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return "".join(line.rstrip("\n") + "\n" for line in handle)
    except OSError:
        return ""


def read_png_text_chunks(path: PathLike) -> list[bytes]:
    """Return the data of every tEXt chunk before IEND in a PNG file."""
    content = _read_bytes(path)
    if content is None or not content.startswith(PNG_SIGNATURE):
        return []

    stream = io.BytesIO(content)
    stream.seek(len(PNG_SIGNATURE))
    chunks: list[bytes] = []
    while True:
        header = stream.read(8)
        if len(header) < 8:
            break
        length, chunk_type = struct.unpack(">I4s", header)
        if chunk_type == b"IEND":
            break
        if chunk_type != b"tEXt":
            stream.seek(length + 4, io.SEEK_CUR)
            continue
        data = stream.read(length)
        if len(data) < length:
            break
        stream.seek(4, io.SEEK_CUR)
        chunks.append(data)
    return chunks


def _extract_json_prompt(parameters: bytes) -> bytes:
    key = b'"full_prompt":'
    pos = parameters.find(key)
    if pos < 0:
        return b""
    rest = parameters[pos + len(key):]
    begin = rest.find(b'"')
    if begin < 0:
        return b""
    end = rest.find(b'"', begin + 1)
    if end < 0:
        return b""
    return rest[begin + 1:end]


def read_png_info(path: PathLike) -> str:
    """Return the prompt stored in a PNG's parameters text chunk."""
    parameters = b""
    parameters_is_json = False
    for chunk in read_png_text_chunks(path):
        keyword, sep, text = chunk.partition(b"\x00")
        if not sep:
            continue
        if keyword == b"parameters":
            parameters = text
        elif keyword == b"fooocus_scheme" and text == b"fooocus":
            parameters_is_json = True

    if parameters_is_json:
        prompt = _extract_json_prompt(parameters)
    else:
        line, lf, _ = parameters.partition(b"\n")
        prompt = line if lf else b""
    return prompt.decode("utf-8", errors="replace")


def read_exif_chunk(data: bytes) -> str:
    """Return the prompt found in raw EXIF data, or "" if there is none."""
    a1111_pos = data.find(b"a1111")
    if a1111_pos >= 0:
        line, lf, _ = data[a1111_pos + 6:].partition(b"\n")
        if lf:
            return line.decode("utf-8", errors="replace")

    unicode_pos = data.find(b"UNICODE")
    if unicode_pos >= 0:
        params = data[unicode_pos + 9:]
        params = params[: len(params) // 2 * 2]
        text = params.decode("utf-16-le", errors="replace")
        line, lf, _ = text.partition("\n")
        if lf:
            return line

    return ""


def read_jpeg_info(path: PathLike) -> str:
    """Return the prompt from a JPEG's Exif APP1 segment."""
    content = _read_bytes(path)
    if content is None or content[:2] != b"\xff\xd8":
        return ""

    stream = io.BytesIO(content)
    stream.seek(2)
    while True:
        marker = stream.read(2)
        if len(marker) < 2 or marker[0] != 0xFF:
            break
        size_bytes = b""
        if marker[1] == 0xDA:
            break
        size_bytes = stream.read(2)
        if len(size_bytes) < 2:
            break
        (size,) = struct.unpack(">H", size_bytes)
        if marker[1] == 0xE1:
            if stream.read(6) == EXIF_HEADER:
                info = read_exif_chunk(stream.read(max(size - 8, 0)))
                if info:
                    return info
        else:
            stream.seek(size - 2, io.SEEK_CUR)
    return ""


def read_webp_info(path: PathLike) -> str:
    """Return the prompt from a WebP file's EXIF chunk."""
    content = _read_bytes(path)
    if content is None or content[:4] != b"RIFF" or content[8:12] != b"WEBP":
        return ""

    stream = io.BytesIO(content)
    stream.seek(12)
    while True:
        header = stream.read(8)
        if len(header) < 8:
            break
        chunk_type, chunk_size = struct.unpack("<4sI", header)
        if chunk_type == b"EXIF":
            info = read_exif_chunk(stream.read(chunk_size))
            if info:
                return info
        else:
            stream.seek(chunk_size, io.SEEK_CUR)
    return ""


def read_file_info(path: PathLike) -> str:
    """Return the prompt held in a file, chosen by its extension; "" otherwise."""
    ext = os.fspath(path).rsplit(".", 1)[-1].lower()
    if ext == "txt":
        return read_text_file(path)
    if ext == "png":
        return read_png_info(path)
    if ext in ("jpg", "jpeg"):
        return read_jpeg_info(path)
    if ext == "webp":
        return read_webp_info(path)
    return ""