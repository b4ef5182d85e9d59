import os

import pytest

import fountainpager.util as util

# test util stuff

def testClamp():
    assert util.clamp(5, 1, 10) == 5
    assert util.clamp(-5, 1, 10) == 1
    assert util.clamp(50, 1, 10) == 10
    assert util.clamp(50) == 50
    assert util.clamp(50, maxVal = 7) == 7

def testStr2Conversions():
    assert util.str2int("12", 5) == 12
    assert util.str2int("12.5", 5) == 5
    assert util.str2int("100", 5, 1, 30) == 30
    assert util.str2float("0.75", 1.0) == 0.75
    assert util.str2float("wide", 1.0) == 1.0
    assert util.str2float("-2", 1.0, 0.0) == 0.0
    assert util.str2float("nan", 1.0) == 1.0
    assert util.str2float("inf", 1.0, 0.0, 10.0) == 1.0
    assert util.str2float("-inf", 1.0) == 1.0

    for s in ("True", "true", " yes", "on", "1"):
        assert util.str2bool(s)

    for s in ("False", "no", "0", "", "maybe"):
        assert not util.str2bool(s)

def testFixNL():
    assert util.fixNL("a\r\nb\rc\nd") == "a\nb\nc\nd"

def testIsBlank():
    assert util.isBlank("")
    assert util.isBlank(" \t ")
    assert not util.isBlank(" x ")

def testInches2Points():
    assert util.inches2points(1.5) == 108.0

def testGetTextWidth():
    assert util.getTextWidth("JOHN", "Courier", 12) == pytest.approx(28.8)

def testWriteAndLoadFile(tmp_path):
    fn = str(tmp_path / "out.txt")

    util.writeToFile(fn, "yö\n")
    assert util.loadFile(fn) == "yö\n"

    util.writeToFile(fn, b"replaced")
    assert util.loadFile(fn) == "replaced"

    assert os.listdir(str(tmp_path)) == ["out.txt"]

def testWriteToMissingDir(tmp_path):
    with pytest.raises(OSError):
        util.writeToFile(str(tmp_path / "nope" / "out.txt"), "x")

def testLoadMissingFile(tmp_path):
    with pytest.raises(OSError):
        util.loadFile(str(tmp_path / "nope.txt"))
