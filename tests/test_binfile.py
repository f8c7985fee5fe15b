from imagemerge.binfile import file_size, read_binary_file, write_binary_file


def test_read_whole_file(tmp_path):
    p = tmp_path / "prog.bin"
    p.write_bytes(b"\x00\x01\x02\xFF")
    assert read_binary_file(str(p)) == b"\x00\x01\x02\xFF"
    assert file_size(str(p)) == 4


def test_missing_file(tmp_path):
    p = tmp_path / "nope.bin"
    assert read_binary_file(str(p)) == b""
    assert file_size(str(p)) == 0


def test_empty_file(tmp_path):
    p = tmp_path / "empty.bin"
    p.write_bytes(b"")
    assert read_binary_file(str(p)) == b""


def test_no_path():
    assert read_binary_file(None) == b""
    assert read_binary_file("") == b""
    assert file_size(None) == 0


def test_write_truncates(tmp_path):
    p = tmp_path / "out.bin"
    p.write_bytes(b"\xEE" * 100)
    assert write_binary_file(str(p), b"\x01\x02") == 2
    assert p.read_bytes() == b"\x01\x02"
