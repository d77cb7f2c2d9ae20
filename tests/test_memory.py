import pytest

from eya import memory


def _pattern(size):
    return bytes(i & 0xFF for i in range(size))


# fill


def test_fill_zero_length():
    buffer = bytearray(10)
    ret = memory.fill(memoryview(buffer)[:0], 0xAA)
    assert buffer == bytearray(10)
    assert ret == 0


def test_fill_full_buffer():
    buffer = bytearray(64)
    ret = memory.fill(buffer, 0x55)
    assert buffer == bytes([0x55]) * 64
    assert ret == 64


def test_fill_partial_buffer():
    buffer = bytearray(32)
    memory.fill(buffer, 0)
    ret = memory.fill(memoryview(buffer)[:20], 0xFF)
    assert buffer[:20] == bytes([0xFF]) * 20
    assert buffer[20:] == bytes(12)
    assert ret == 20


def test_fill_single_byte():
    buffer = bytearray(1)
    ret = memory.fill(buffer, 0x7E)
    assert buffer[0] == 0x7E
    assert ret == 1


def test_fill_large_buffer():
    buffer = bytearray(128)
    memory.fill(buffer, 0)
    ret = memory.fill(buffer, 0x0F)
    assert buffer == bytes([0x0F]) * 128
    assert ret == 128


def test_fill_bad_value():
    with pytest.raises(ValueError):
        memory.fill(bytearray(4), 256)


def test_fill_readonly():
    with pytest.raises(TypeError):
        memory.fill(b"abcd", 1)


# copy


def test_copy_small_array():
    src = b"Hello, world!\x00"
    dst = bytearray(len(src))
    ret = memory.copy(dst, src)
    assert ret == len(src)
    assert dst == src


@pytest.mark.parametrize("size", [1024 * 1024, 128, 256, 512])
def test_copy_sizes(size):
    src = _pattern(size)
    dst = bytearray(size)
    ret = memory.copy(dst, src)
    assert ret == size
    assert dst == src


def test_copy_one_byte():
    dst = bytearray(1)
    ret = memory.copy(dst, bytes([42]))
    assert ret == 1
    assert dst[0] == 42


def test_copy_none_dst():
    with pytest.raises(TypeError):
        memory.copy(None, b"data")


def test_copy_none_src():
    with pytest.raises(TypeError):
        memory.copy(bytearray(10), None)


def test_copy_zero_length():
    dst = bytearray(10)
    ret = memory.copy(dst, b"")
    assert ret == 0
    assert dst == bytearray(10)


def test_copy_uses_shorter_length():
    dst = bytearray(b"xxxxxx")
    ret = memory.copy(dst, b"ab")
    assert ret == 2
    assert dst == bytearray(b"abxxxx")


# copy_rev


def test_copy_rev_small_array():
    src = b"Hello, world!\x00"
    dst = bytearray(len(src))
    ret = memory.copy_rev(dst, src)
    assert ret == len(src)
    assert all(dst[i] == src[len(src) - 1 - i] for i in range(len(src)))


@pytest.mark.parametrize("size", [1024 * 1024, 128, 256, 512])
def test_copy_rev_sizes(size):
    src = _pattern(size)
    dst = bytearray(size)
    ret = memory.copy_rev(dst, src)
    assert ret == size
    assert bytes(dst) == src[::-1]


def test_copy_rev_one_byte():
    dst = bytearray(1)
    ret = memory.copy_rev(dst, bytes([42]))
    assert ret == 1
    assert dst[0] == 42


def test_copy_rev_none_dst():
    with pytest.raises(TypeError):
        memory.copy_rev(None, b"data")


def test_copy_rev_none_src():
    with pytest.raises(TypeError):
        memory.copy_rev(bytearray(10), None)


def test_copy_rev_zero_length():
    dst = bytearray(10)
    assert memory.copy_rev(memoryview(dst)[:0], b"Test data") == 0
    assert dst == bytearray(10)


# rcopy


def test_rcopy_small_array():
    src = b"Hello, world!\x00"
    dst = bytearray(len(src))
    ret = memory.rcopy(dst, src)
    assert ret == 0
    assert dst == src


@pytest.mark.parametrize("size", [1024 * 1024, 128, 256, 512])
def test_rcopy_sizes(size):
    src = _pattern(size)
    dst = bytearray(size)
    ret = memory.rcopy(dst, src)
    assert ret == 0
    assert dst == src


def test_rcopy_one_byte():
    dst = bytearray(1)
    assert memory.rcopy(dst, bytes([42])) == 0
    assert dst[0] == 42


def test_rcopy_zero_length():
    dst = bytearray(5)
    ret = memory.rcopy(memoryview(dst)[:0], b"test\x00")
    assert ret == 0
    assert dst == bytearray(5)


def test_rcopy_none_dst():
    with pytest.raises(TypeError):
        memory.rcopy(None, b"data")


def test_rcopy_none_src():
    with pytest.raises(TypeError):
        memory.rcopy(bytearray(10), None)


# move


def test_move_non_overlapping():
    src = b"test data\x00"
    dst = bytearray(len(src))
    ret = memory.move(dst, src)
    assert dst == src
    assert ret == len(src)


def test_move_overlap_src_before_dst():
    buffer = bytearray(b"abcdefghij")
    view = memoryview(buffer)
    ret = memory.move(view[2:], view[:5])
    assert buffer == bytearray(b"ababcdehij")
    assert ret == 5


def test_move_overlap_dst_before_src():
    buffer = bytearray(b"abcdefghij")
    view = memoryview(buffer)
    ret = memory.move(view[:5], view[2:])
    assert buffer == bytearray(b"cdefgfghij")
    assert ret == 5


def test_move_zero_bytes():
    dst = bytearray(b"destination")
    ret = memory.move(memoryview(dst)[:0], b"source")
    assert dst == bytearray(b"destination")
    assert ret == 0


def test_move_none():
    with pytest.raises(TypeError):
        memory.move(None, None)


def test_move_same_buffer():
    buffer = bytearray(b"test data\x00")
    ret = memory.move(buffer, buffer)
    assert buffer == bytearray(b"test data\x00")
    assert ret == len(buffer)


def test_move_partial_overlap_small():
    buffer = bytearray([1, 2, 3, 4, 5])
    view = memoryview(buffer)
    ret = memory.move(view[1:4], view[:3])
    assert list(buffer) == [1, 1, 2, 3, 5]
    assert ret == 3


# set_pattern


def test_set_pattern_repeats():
    dst = bytearray(7)
    ret = memory.set_pattern(dst, b"abc")
    assert dst == bytearray(b"abcabca")
    assert ret == 7


def test_set_pattern_empty_pattern():
    dst = bytearray(b"xyz")
    assert memory.set_pattern(dst, b"") == 0
    assert dst == bytearray(b"xyz")


def test_set_pattern_none():
    with pytest.raises(TypeError):
        memory.set_pattern(None, b"ab")


# compare


def test_compare_equal():
    assert memory.compare(b"abcdefghijklmnop", b"abcdefghijklmnop") is None
    assert memory.compare(b"A" * 32, b"A" * 32) is None
    assert memory.compare(b"B" * 128, b"B" * 128) is None
    assert memory.compare(b"", b"abc") is None


def test_compare_unequal():
    assert memory.compare(b"Xbcdefgh", b"Ybcdefgh") == 0
    assert memory.compare(b"abcdXghi", b"abcdYghi") == 4
    assert memory.compare(b"abcdefgh", b"abcdefgX") == 7
    assert memory.compare(b"abcdefghijklmnop", b"abcdefghijkXmnop") == 11
    lhs = bytearray(b"A" * 32)
    rhs = bytearray(b"A" * 32)
    lhs[20] = ord("X")
    rhs[20] = ord("Y")
    assert memory.compare(lhs, rhs) == 20


def test_compare_unaligned():
    buf1 = memoryview(b"abcdefghijklmnopqrst")
    buf2 = memoryview(b"abcdefghijklmnopqrst")
    assert memory.compare(buf1[1:17], buf2[1:17]) is None
    buf3 = memoryview(b"abcdefghXjklmnopqrst")
    buf4 = memoryview(b"abcdefghYjklmnopqrst")
    assert memory.compare(buf3[1:17], buf4[1:17]) == 7


def test_compare_partial_blocks():
    assert memory.compare(b"abcdefg", b"abcdefg") is None
    assert memory.compare(b"abcdefX", b"abcdefY") == 6
    assert memory.compare(b"A", b"A") is None
    assert memory.compare(b"A", b"B") == 0


def test_compare_uses_shorter_length():
    assert memory.compare(b"abc", b"abcdef") is None


# rcompare


def test_rcompare_empty():
    assert memory.rcompare(b"", b"") is None


def test_rcompare_small_identical():
    data = bytes(range(1, 17))
    assert memory.rcompare(data, data) is None


def test_rcompare_small_mismatch_last():
    lhs = bytes(range(1, 17))
    rhs = bytes(range(1, 16)) + bytes([99])
    assert memory.rcompare(lhs, rhs) == 15


def test_rcompare_small_mismatch_first():
    lhs = bytes(range(1, 17))
    rhs = bytes([99]) + bytes(range(2, 17))
    assert memory.rcompare(lhs, rhs) == 0


def test_rcompare_medium():
    lhs = bytearray([0xAA]) * 32
    rhs = bytearray([0xAA]) * 32
    assert memory.rcompare(lhs, rhs) is None
    lhs[16] = 0xBB
    assert memory.rcompare(lhs, rhs) == 16


def test_rcompare_large():
    lhs = bytearray([0x55]) * 128
    rhs = bytearray([0x55]) * 128
    assert memory.rcompare(lhs, rhs) is None
    lhs[127] = 0x66
    assert memory.rcompare(lhs, rhs) == 127
    lhs[127] = 0x55
    lhs[0] = 0x66
    assert memory.rcompare(lhs, rhs) == 0


def test_rcompare_unaligned():
    lhs = bytearray([0x33]) * 135
    rhs = bytearray([0x33]) * 135
    assert memory.rcompare(memoryview(lhs)[1:], memoryview(rhs)[1:]) is None
    lhs[66] = 0x44
    assert memory.rcompare(memoryview(lhs)[1:], memoryview(rhs)[1:]) == 65


def test_rcompare_aligns_tails():
    assert memory.rcompare(b"xxabc", b"abc") is None
    assert memory.rcompare(b"xxabd", b"abc") == 4


# find / rfind


def test_find_full_match():
    assert memory.find(b"hello world", b"world") == 6
    assert memory.find(b"abcabc", b"bc") == 1


def test_find_partial_match_at_end():
    assert memory.find(b"abc", b"cd") == 2


def test_find_none():
    assert memory.find(b"abc", b"xy") is None
    assert memory.find(b"", b"a") is None
    assert memory.find(b"abc", b"") is None


def test_find_none_buffer():
    with pytest.raises(TypeError):
        memory.find(None, b"a")


def test_rfind_full_match():
    assert memory.rfind(b"abcabc", b"bc") == 4
    assert memory.rfind(b"hello world", b"hello") == 0


def test_rfind_partial_match_at_start():
    assert memory.rfind(b"cab", b"xc") == -1


def test_rfind_none():
    assert memory.rfind(b"abc", b"xy") is None
    assert memory.rfind(b"", b"a") is None
    assert memory.rfind(b"abc", b"") is None