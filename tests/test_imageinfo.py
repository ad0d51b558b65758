import struct
import zlib

import pytest

from booruprompt.imageinfo import (
    read_exif_chunk,
    read_file_info,
    read_jpeg_info,
    read_png_info,
    read_png_text_chunks,
    read_text_file,
    read_webp_info,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def png_chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def make_png(*texts: bytes) -> bytes:
    body = png_chunk(b"IHDR", b"\x00" * 13)
    for text in texts:
        body += png_chunk(b"tEXt", text)
    body += png_chunk(b"IDAT", b"\x01\x02\x03")
    body += png_chunk(b"IEND", b"")
    body += png_chunk(b"tEXt", b"parameters\x00after end\n")
    return PNG_SIGNATURE + body


def make_jpeg(exif_payload: bytes) -> bytes:
    app0 = b"\xff\xe0" + struct.pack(">H", 2 + 4) + b"JFIF"
    app1 = b"\xff\xe1" + struct.pack(">H", 8 + len(exif_payload)) + b"Exif\x00\x00" + exif_payload
    sos = b"\xff\xda" + struct.pack(">H", 2)
    return b"\xff\xd8" + app0 + app1 + sos + b"\x00\x00"


def make_webp(exif_payload: bytes) -> bytes:
    other = b"VP8 " + struct.pack("<I", 4) + b"\x00\x00\x00\x00"
    exif = b"EXIF" + struct.pack("<I", len(exif_payload)) + exif_payload
    body = b"WEBP" + other + exif
    return b"RIFF" + struct.pack("<I", len(body)) + body


def test_text_file_lines(tmp_path):
    path = tmp_path / "prompt.txt"
    path.write_text("1girl, solo\nsmile", encoding="utf-8")
    assert read_text_file(path) == "1girl, solo\nsmile\n"
    assert read_file_info(path) == "1girl, solo\nsmile\n"


def test_missing_files_give_empty(tmp_path):
    assert read_text_file(tmp_path / "nope.txt") == ""
    assert read_png_text_chunks(tmp_path / "nope.png") == []
    assert read_file_info(tmp_path / "nope.jpg") == ""


def test_png_chunks_stop_at_iend(tmp_path):
    path = tmp_path / "a.png"
    path.write_bytes(make_png(b"parameters\x00cat, dog\nSteps: 20", b"Software\x00tool"))
    assert read_png_text_chunks(path) == [b"parameters\x00cat, dog\nSteps: 20", b"Software\x00tool"]


def test_png_a1111_prompt(tmp_path):
    path = tmp_path / "a.PNG"
    path.write_bytes(make_png(b"parameters\x00cat, dog\nNegative prompt: bad"))
    assert read_png_info(path) == "cat, dog"
    assert read_file_info(path) == "cat, dog"


def test_png_prompt_without_newline_is_empty(tmp_path):
    path = tmp_path / "a.png"
    path.write_bytes(make_png(b"parameters\x00single line"))
    assert read_png_info(path) == ""


def test_png_fooocus_json(tmp_path):
    path = tmp_path / "f.png"
    params = b'parameters\x00{"prompt": "x", "full_prompt": ["sunset, sea"], "steps": 30}'
    path.write_bytes(make_png(params, b"fooocus_scheme\x00fooocus"))
    assert read_png_info(path) == "sunset, sea"


def test_png_bad_signature(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"notapng!" + png_chunk(b"tEXt", b"parameters\x00x\n"))
    assert read_png_text_chunks(path) == []
    assert read_png_info(path) == ""


def test_exif_a1111():
    assert read_exif_chunk(b"\x00\x01a1111:blue sky\nSteps") == "blue sky"


def test_exif_unicode():
    data = b"xxUNICODE\x00\x00" + "青空, cloud\nSteps".encode("utf-16-le")
    assert read_exif_chunk(data) == "青空, cloud"


def test_exif_without_prompt():
    assert read_exif_chunk(b"nothing here") == ""
    assert read_exif_chunk(b"a1111 no newline") == ""


def test_jpeg_exif_prompt(tmp_path):
    path = tmp_path / "img.jpeg"
    path.write_bytes(make_jpeg(b"\x00a1111 forest path\nSteps: 5"))
    assert read_jpeg_info(path) == "forest path"
    assert read_file_info(path) == "forest path"


def test_jpeg_not_jpeg(tmp_path):
    path = tmp_path / "img.jpg"
    path.write_bytes(b"\x00\x00abc")
    assert read_jpeg_info(path) == ""


def test_webp_exif_prompt(tmp_path):
    path = tmp_path / "img.webp"
    payload = b"UNICODE\x00\x00" + "night city\nx".encode("utf-16-le")
    path.write_bytes(make_webp(payload))
    assert read_webp_info(path) == "night city"
    assert read_file_info(path) == "night city"


def test_webp_bad_header(tmp_path):
    path = tmp_path / "img.webp"
    path.write_bytes(b"RIFF\x00\x00\x00\x00WAVE")
    assert read_webp_info(path) == ""


@pytest.mark.parametrize("name", ["image.gif", "archive.zip"])
def test_unknown_extension(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"a1111 hidden\n")
    assert read_file_info(path) == ""