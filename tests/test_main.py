import json

import u
import slugline.main as main
import slugline.opts as opts

def testOpts():
    assert opts.init(["export", "in.json", "out.pdf", "--title-page"]) is None
    assert opts.command == "export"
    assert opts.filenames == ["in.json", "out.pdf"]
    assert opts.showTitlePage
    assert not opts.verbose

    assert opts.init(["fdx", "a", "b", "--verbose"]) is None
    assert opts.verbose
    assert not opts.showTitlePage

    assert opts.init([]) is not None
    assert opts.init(["print", "a", "b"]) is not None
    assert opts.init(["export", "a"]) is not None
    assert opts.init(["export", "a", "b", "--bogus"]) is not None

def testExportJSON(tmp_path):
    inFile = tmp_path / "in.json"
    outFile = tmp_path / "out.pdf"

    inFile.write_text(json.dumps(u.new().toDict()), encoding = "UTF-8")

    assert main.main(["export", str(inFile), str(outFile),
                      "--title-page"]) == 0
    assert outFile.read_bytes().startswith(b"%PDF-1.5")

def testExportNative(tmp_path):
    outFile = tmp_path / "out.pdf"

    assert main.main(["export", u.fixtureFilePath("test.slugline"),
                      str(outFile)]) == 0
    assert outFile.read_bytes().startswith(b"%PDF-1.5")

def testFDX(tmp_path):
    outFile = tmp_path / "out.fdx"

    assert main.main(["fdx", u.fixtureFilePath("test.slugline"),
                      str(outFile)]) == 0
    assert b"<FinalDraft" in outFile.read_bytes()

def testErrors(tmp_path, capsys):
    assert main.main(["export"]) == 2
    assert "usage:" in capsys.readouterr().err

    assert main.main(["export", str(tmp_path / "missing.json"),
                      str(tmp_path / "out.pdf")]) == 1

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding = "UTF-8")

    assert main.main(["export", str(bad), str(tmp_path / "out.pdf")]) == 1

def testHelp(capsys):
    assert main.main(["--help"]) == 0
    assert "usage:" in capsys.readouterr().out
