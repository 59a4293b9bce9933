import datetime

import pytest

from kpkboard.misc import PRNG, CommandLine, HashTable, engine_info, mul_hi64


def test_engine_info_nogit_tag():
    info = engine_info(build_date=datetime.date(2008, 9, 21))
    assert info.startswith("kpkboard dev-20080921-nogit by ")


def test_engine_info_uci_and_sha():
    info = engine_info(True, "20230101", "abc123")
    head, author = info.split("\n")
    assert head == "kpkboard dev-20230101-abc123"
    assert author.startswith("id author ")


def test_engine_info_plain_has_no_newline():
    assert "\n" not in engine_info(False, "20230101")


def test_mul_hi64_small_products_are_zero():
    assert mul_hi64(12345, 1) == 0
    assert mul_hi64(1 << 31, 1 << 32) == 0


def test_mul_hi64_shift_invariant():
    a = 0xDEADBEEFCAFEBABE
    assert mul_hi64(a, 1 << 32) == a >> 32


def test_mul_hi64_symmetric():
    a, b = 0x123456789ABCDEF0, 0xFEDCBA9876543210
    assert mul_hi64(a, b) == mul_hi64(b, a)


def test_mul_hi64_max():
    m = (1 << 64) - 1
    assert mul_hi64(m, m) == m - 1


def test_prng_zero_seed_rejected():
    with pytest.raises(ValueError):
        PRNG(0)


def test_prng_deterministic():
    a, b = PRNG(8977), PRNG(8977)
    assert [a.rand64() for _ in range(20)] == [b.rand64() for _ in range(20)]


def test_prng_different_seeds_differ():
    a, b = PRNG(728), PRNG(729)
    assert [a.rand64() for _ in range(5)] != [b.rand64() for _ in range(5)]


def test_prng_output_is_64_bit():
    rng = PRNG(44560)
    values = [rng.rand64() for _ in range(200)]
    assert all(0 <= v < 1 << 64 for v in values)
    assert len(set(values)) == len(values)


def test_sparse_rand_is_sparse():
    rng = PRNG(54343)
    bits = [bin(rng.sparse_rand()).count("1") for _ in range(1000)]
    assert sum(bits) / len(bits) < 16


def test_hash_table_same_key_same_entry():
    table = HashTable(dict, 16)
    table[5]["x"] = 1
    assert table[5] == {"x": 1}
    assert table[5 + 16] is table[5]


def test_hash_table_uses_low_32_bits():
    table = HashTable(list, 8)
    assert table[(1 << 32) + 3] is table[3]


def test_hash_table_distinct_slots():
    table = HashTable(list, 8)
    assert table[1] is not table[2]
    assert len(table) == 8


@pytest.mark.parametrize("size", [0, 3, 100])
def test_hash_table_rejects_bad_size(size):
    with pytest.raises(ValueError):
        HashTable(list, size)


def test_command_line_relative_path():
    cl = CommandLine.from_argv("./engine", "/home/user", "/")
    assert cl.binary_directory == "/home/user/"
    assert cl.working_directory == "/home/user"
    assert cl.argv0 == "./engine"


def test_command_line_bare_name():
    cl = CommandLine.from_argv("engine", "/work", "/")
    assert cl.binary_directory == "/work/"


def test_command_line_absolute_path():
    cl = CommandLine.from_argv("/usr/bin/engine", "/work", "/")
    assert cl.binary_directory == "/usr/bin/"


def test_command_line_windows_path():
    cl = CommandLine.from_argv("C:\\games\\engine.exe", "C:\\work", "\\")
    assert cl.binary_directory == "C:\\games\\"