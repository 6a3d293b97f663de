import sqlite3

import pytest

import slugline.block as block
import slugline.error as error
import slugline.screenplay as scr
import slugline.storage as storage
import slugline.titles as titles

def newStorage(tmp_path):
    return storage.Storage(str(tmp_path / "test.db"))

def someBlocks():
    return [block.Block(scr.SCENE, "INT. HOUSE - DAY"),
            block.Block(scr.ACTION, "Quiet.")]

def testSeedsSample(tmp_path):
    st = newStorage(tmp_path)
    docs = st.list()

    assert len(docs) == 1
    assert docs[0]["id"] == storage.SAMPLE_ID
    assert docs[0]["title"] == "Sample Screenplay"
    assert docs[0]["content"][0] == {"type" : "scene-heading",
                                     "text" : "INT. SAMPLE ROOM - DAY"}
    assert docs[0]["title_page"]["author"] == "Your Name"

    # reopening does not seed again
    st = newStorage(tmp_path)
    assert len(st.list()) == 1

def testCreateGet(tmp_path):
    st = newStorage(tmp_path)
    tp = titles.TitlePage("House", "Me")

    doc = st.create("House", someBlocks(), tp)

    assert doc["id"].startswith("screenplay-")
    assert doc["title"] == "House"
    assert doc["title_page"] == tp.toDict()
    assert doc["created_at"]

    doc2 = st.get(doc["id"])
    assert doc2 == doc

    assert len(st.list()) == 2

    sp, msg = scr.Screenplay.fromDict(doc2)
    assert sp.blocks == someBlocks()
    assert sp.titles == tp

def testCreateRequiresTitleAndContent(tmp_path):
    st = newStorage(tmp_path)

    with pytest.raises(error.StorageError):
        st.create("", someBlocks(), None)

    with pytest.raises(error.StorageError):
        st.create("Title", [], None)

def testUpdate(tmp_path):
    st = newStorage(tmp_path)
    doc = st.create("House", someBlocks(), titles.TitlePage("House"))

    blocks = someBlocks() + [block.Block(scr.CHARACTER, "BOB")]
    doc2 = st.update(doc["id"], blocks, titles.TitlePage("House", "Bob"))

    assert doc2["title"] == "House"
    assert len(doc2["content"]) == 3
    assert doc2["title_page"]["author"] == "Bob"

    doc3 = st.update(doc["id"], blocks, None, title = "Home")
    assert doc3["title"] == "Home"
    assert doc3["title_page"] == {}

def testNotFound(tmp_path):
    st = newStorage(tmp_path)

    with pytest.raises(error.NotFoundError) as e:
        st.get("nope")

    assert e.value.docId == "nope"
    assert "not found" in str(e.value)

    with pytest.raises(error.NotFoundError):
        st.update("nope", someBlocks(), None)

    with pytest.raises(error.NotFoundError):
        st.delete("nope")

    # NotFoundError is a StorageError
    with pytest.raises(error.StorageError):
        st.get("nope")

def testDelete(tmp_path):
    st = newStorage(tmp_path)

    st.delete(storage.SAMPLE_ID)

    assert st.list() == []

    with pytest.raises(error.NotFoundError):
        st.get(storage.SAMPLE_ID)

def testSaveCurrent(tmp_path):
    st = newStorage(tmp_path)

    # no record has this title as its id, so a new one is created
    doc = st.saveCurrent("House", someBlocks(), None)
    assert doc["id"] != "House"
    assert len(st.list()) == 2

    # the title is looked up as an id, so the same title again adds
    # another record
    doc2 = st.saveCurrent("House", someBlocks(), None)
    assert doc2["id"] != doc["id"]
    assert [d["title"] for d in st.list()].count("House") == 2
    assert len(st.list()) == 3

    doc = st.saveCurrent(storage.SAMPLE_ID, someBlocks(), None)
    assert doc["id"] == storage.SAMPLE_ID
    assert doc["title"] == "Sample Screenplay"
    assert doc["content"][1]["text"] == "Quiet."
    assert len(st.list()) == 3

def testBadPath(tmp_path):
    with pytest.raises(error.StorageError):
        storage.Storage(str(tmp_path / "no" / "such" / "dir" / "x.db"))

def testCorruptRecord(tmp_path):
    st = newStorage(tmp_path)

    conn = sqlite3.connect(st.path)
    conn.execute("UPDATE screenplays SET content = 'not json'")
    conn.commit()
    conn.close()

    with pytest.raises(error.StorageError):
        st.get(storage.SAMPLE_ID)
