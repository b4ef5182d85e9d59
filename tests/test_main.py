import logging

import fountainpager.main as main

SCRIPT = "INT. HOUSE - DAY\n\nJohn enters.\n"

def writeFile(path, s):
    with open(str(path), "w", encoding = "UTF-8") as f:
        f.write(s)

def testMain(tmp_path, capsys):
    script = tmp_path / "script.fountain"
    out = tmp_path / "script.pdf"
    writeFile(script, SCRIPT)

    assert main.main([str(script), "-o", str(out)]) == 0
    assert capsys.readouterr().out.strip() == str(out)

    with open(str(out), "rb") as f:
        assert f.read(8) == b"%PDF-1.5"

def testMainWithConf(tmp_path, caplog):
    script = tmp_path / "script.fountain"
    conf = tmp_path / "fp.conf"
    out = tmp_path / "script.pdf"

    writeFile(script, SCRIPT)
    writeFile(conf, "sceneNumbers: true\nnoSuchSetting: 1\n")

    with caplog.at_level(logging.WARNING):
        assert main.main(["--conf", str(conf), "-o", str(out),
                          str(script)]) == 0

    assert "noSuchSetting" in caplog.text
    assert out.exists()

def testMainMissingScript(tmp_path):
    assert main.main([str(tmp_path / "nothere.fountain")]) == 1

def testMainScriptNotUtf8(tmp_path, caplog):
    script = tmp_path / "script.fountain"
    script.write_bytes(b"INT. HOUSE\n\xff\xfe\n")

    with caplog.at_level(logging.ERROR):
        assert main.main([str(script), "-o", str(tmp_path / "out.pdf")]) == 1

    assert "not UTF-8" in caplog.text
    assert str(script) in caplog.text
    assert not (tmp_path / "out.pdf").exists()

def testMainConfNotUtf8(tmp_path):
    script = tmp_path / "script.fountain"
    conf = tmp_path / "fp.conf"

    writeFile(script, SCRIPT)
    conf.write_bytes(b"sceneNumbers: \xff\n")

    assert main.main(["--conf", str(conf), str(script)]) == 1

def testMainExportFails(tmp_path):
    script = tmp_path / "script.fountain"
    writeFile(script, SCRIPT)

    out = tmp_path / "missing" / "script.pdf"

    assert main.main([str(script), "-o", str(out)]) == 1
