import logging
import os
import tempfile

import fountainpager.config as config
import fountainpager.export as export

import u

SCRIPT = """Title: ACME
Author: J. Doe

INT. HOUSE - DAY

John enters.

JOHN^
Hello.

MARY
Hi.

CUT TO:
"""

def testExport(tmp_path):
    out = str(tmp_path / "acme.pdf")

    assert export.exportScreenplay(SCRIPT, outPath = out) == out

    with open(out, "rb") as f:
        data = f.read()

    assert data[:8] == b"%PDF-1.5"

def testExportToDefaultLocation(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))

    res = export.exportScreenplay(SCRIPT)

    assert os.path.dirname(res) == str(tmp_path)
    assert os.path.basename(res).startswith("fountain-export-")
    assert res.endswith(".pdf")
    assert os.path.exists(res)

def testExportWithWriter():
    cfg = u.newConfig(fontSize = 10, lineGap = 2)
    w = u.FakeWriter(cfg.getGeometry())

    assert export.exportScreenplay(SCRIPT, cfg, dw = w) == "fake.pdf"
    assert w.finalized
    assert w.size == 10
    assert w.lineGap == 2.0
    assert "ACME" in w.texts(0)

def testNoScript():
    cfg = config.Config()
    w = u.FakeWriter(cfg.getGeometry())

    assert export.exportScreenplay(None, cfg, dw = w) is None
    assert w.pages == [[]]
    assert not w.finalized

def testBadFont(tmp_path, caplog):
    out = str(tmp_path / "acme.pdf")
    cfg = u.newConfig(fontPath = str(tmp_path / "nosuchfont.ttf"))

    with caplog.at_level(logging.ERROR):
        assert export.exportScreenplay(SCRIPT, cfg, out) is None

    assert not os.path.exists(out)
    assert "screenplay export failed" in caplog.text

def testUnwritableOutput(tmp_path):
    out = str(tmp_path / "missing" / "acme.pdf")

    assert export.exportScreenplay(SCRIPT, outPath = out) is None
    assert not os.path.exists(out)
