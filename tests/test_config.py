import pytest

import slugline.config as config
import slugline.error as error
import slugline.mypickle as mypickle
import slugline.screenplay as scr

def testTypeInfo():
    assert config.getLineTypes() == [scr.PARAGRAPH, scr.SCENE, scr.ACTION,
                                     scr.CHARACTER, scr.DIALOGUE, scr.PAREN,
                                     scr.TRANSITION]

    for ti in config.getTIs():
        assert config.char2lt(ti.char) == ti.lt
        assert config.lt2char(ti.lt) == ti.char
        assert config.name2ti(ti.name) is ti
        assert config.extName2lt(ti.extName) == ti.lt
        assert config.lt2extName(ti.lt) == ti.extName

    assert config.lt2ti(scr.SCENE).fdxName == "Scene Heading"
    assert config.extName2lt("scene-heading") == scr.SCENE

    assert config.char2lt("?", False) is None
    assert config.extName2lt("nope", False) is None

    with pytest.raises(error.ConfigError):
        config.char2lt("?")

def testDefaults():
    cfg = config.Config()

    assert (cfg.paperWidth, cfg.paperHeight) == (612.0, 792.0)
    assert cfg.marginTop == cfg.marginBottom == 72.0
    assert cfg.marginLeft == cfg.marginRight == 72.0
    assert cfg.lineHeight == 14.0
    assert cfg.fontSize == 12
    assert cfg.usableHeight == 648.0
    assert cfg.linesOnPage == 46

    bold = [lt for lt in config.getLineTypes() if cfg.getType(lt).isBold]
    assert bold == [scr.SCENE, scr.CHARACTER, scr.TRANSITION]

    assert cfg.getType(scr.SCENE).align == config.ALIGN_CENTER
    assert cfg.getType(scr.TRANSITION).align == config.ALIGN_RIGHT
    assert cfg.getType(scr.CHARACTER).indent == 144.0
    assert cfg.getType(scr.PAREN).indent == 144.0
    assert cfg.getType(scr.DIALOGUE).indent == 108.0

    assert cfg.cvars.getDefault("lineHeight") == 14.0
    assert cfg.cvars.getMinMax("fontSize") == (4, 72)

def testSaveLoad():
    cfg = config.Config()
    cfg.lineHeight = 12.0
    cfg.pdfShowTOC = True
    cfg.getType(scr.DIALOGUE).indent = 100.0

    s = cfg.save()
    assert "LineHeight:12.00\n" in s
    assert "Element/Dialogue/Indent:100.00\n" in s

    cfg2 = config.Config()
    cfg2.load(s)

    assert cfg2.save() == s
    assert cfg2.linesOnPage == 54

def testLoadClamps():
    cfg = config.Config()
    cfg.load("LineHeight:0.5\nFontSize:abc\nMargin/Top:900\n"
             "Margin/Bottom:900\nNoSuchThing:1\n")

    assert cfg.lineHeight == 4.0
    assert cfg.fontSize == 12

    # no room left for a single line, so margins are dropped
    assert cfg.marginTop == 0.0
    assert cfg.marginBottom == 0.0
    assert cfg.usableHeight == 792.0

def testGlobal():
    cfgGl = config.ConfigGlobal()

    assert cfgGl.autoFormat
    assert cfgGl.getType(scr.CHARACTER).newTypeEnter == scr.DIALOGUE
    assert cfgGl.getType(scr.SCENE).newTypeEnter == scr.ACTION

    for lt in config.getLineTypes():
        assert cfgGl.getType(lt).newTypeTab == scr.CHARACTER

    cfgGl.autoFormat = False
    cfgGl.getType(scr.ACTION).newTypeEnter = scr.PAREN

    s = cfgGl.save()
    assert "Element/Action/NewTypeEnter:Parenthetical\n" in s

    cfgGl2 = config.ConfigGlobal()
    cfgGl2.load(s + "Element/Dialogue/NewTypeTab:Bogus\n")

    assert not cfgGl2.autoFormat
    assert cfgGl2.getType(scr.ACTION).newTypeEnter == scr.PAREN
    assert cfgGl2.getType(scr.DIALOGUE).newTypeTab == scr.CHARACTER
    assert cfgGl2.save() == s

def testVars():
    v = mypickle.Vars()
    v.addInt("count", 3, "Count", 1, 5)
    v.addStr("name", "", "Name")
    v.addStr("scratch", "x", "")

    class Obj:
        pass

    obj = Obj()
    v.setDefaults(obj)
    assert (obj.count, obj.name, obj.scratch) == (3, "", "x")

    obj.count = 9
    v.clamp(obj)
    assert obj.count == 5

    obj.name = "a\nb"
    s = v.save("Pre/", obj)
    assert s == "Pre/Count:5\nPre/Name:a\\0Ab\n"

    vals = v.makeVals(s + "Pre/Other:1\n")
    obj2 = Obj()
    v.setDefaults(obj2)
    v.load(vals, "Pre/", obj2)

    assert (obj2.count, obj2.name) == (5, "a\nb")
    assert vals == {"Pre/Other" : "1"}
    assert sorted(v.all) == ["count", "name", "scratch"]
    assert list(v.numeric) == ["count"]
