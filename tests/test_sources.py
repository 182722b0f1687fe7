import pytest
from headerscan.sources import collect_urls, read_urls_from_file


def test_read_urls_drops_blank_lines_and_trims(url_file):
    path = url_file("  example.com  \n\n   \nhttps://b.example\r\n\thttp://c.example\n")
    assert read_urls_from_file(path) == ["example.com", "https://b.example", "http://c.example"]


def test_collect_urls_cli_first(url_file):
    path = url_file("file1.example\nfile2.example\n")
    assert collect_urls(["cli1.example", "cli2.example"], path) == [
        "cli1.example", "cli2.example", "file1.example", "file2.example",
    ]


def test_collect_urls_without_file():
    assert collect_urls(["a.example"]) == ["a.example"]
    assert collect_urls([], "") == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        collect_urls(["a.example"], str(tmp_path / "nope.txt"))


def test_undecodable_bytes_do_not_abort(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_bytes(b"good.example\n\xff\xfebad\n")
    urls = read_urls_from_file(str(path))
    assert len(urls) == 2
    assert urls[0] == "good.example"
