import fountainpager.titles as titles
import fountainpager.util as util

import u

def testParse():
    text = "Title: ACME\nAuthor: J. Doe\n\nINT. HOUSE - DAY\n"
    res = titles.parseTitlePage(text)

    assert res.consumed == 2
    assert res.metadata == {"title" : ["ACME"], "author" : ["J. Doe"]}

def testParseContinuationLines():
    text = "\n".join([
        "Title:",
        "    _**BRICK & STEEL**_",
        "    _**FULL RETIRED**_",
        "Credit: Written by",
        "Draft date: 1/20/2012",
        "Contact:",
        "\tNext Level Productions",
        "\t1588 Mission Dr.",
        "",
        "EXT. BRICK'S PATIO - DAY"])
    res = titles.parseTitlePage(text)

    assert res.consumed == 8
    assert res.metadata["title"] == ["BRICK & STEEL", "FULL RETIRED"]
    assert res.metadata["credit"] == ["Written by"]
    assert res.metadata["draft date"] == ["1/20/2012"]
    assert res.metadata["contact"] == ["Next Level Productions",
                                       "1588 Mission Dr."]

def testIndentedLineAfterValueEndsTitlePage():
    res = titles.parseTitlePage("Title: ACME\n    Part two\nAuthor: Me")

    assert res.consumed == 1
    assert res.metadata == {"title" : ["ACME"]}

    res = titles.parseTitlePage("Title:\n    ACME\n    Part two\nAuthor: Me")

    assert res.consumed == 4
    assert res.metadata["title"] == ["ACME", "Part two"]

def testKeysAreCaseInsensitive():
    res = titles.parseTitlePage("TITLE: Big\nAUTHOR: Me")

    assert res.metadata == {"title" : ["Big"], "author" : ["Me"]}
    assert res.consumed == 2

def testNoTitle():
    assert titles.parseTitlePage("Author: J. Doe\n\nAction.") == (0, {})
    assert titles.parseTitlePage("INT. HOUSE - DAY\nTitle: no") == (0, {})
    assert titles.parseTitlePage("") == (0, {})
    assert titles.parseTitlePage("\nTitle: late") == (0, {})

def testStopsAtNonKeyLine():
    res = titles.parseTitlePage("Title: ACME\nJohn enters.")

    assert res.consumed == 1
    assert res.metadata == {"title" : ["ACME"]}

def testParseIsStable():
    text = "Title: ACME\nAuthor: J. Doe\n\nINT. HOUSE - DAY\nJohn enters."
    res = titles.parseTitlePage(text)

    lines = text.split("\n")
    again = titles.parseTitlePage("\n".join(lines[:res.consumed]))

    assert again == res

    # the rest of the script holds no further title page
    assert titles.parseTitlePage("\n".join(lines[res.consumed:])) == (0, {})

def testGenerate():
    cfg = u.newConfig()
    geom = cfg.getGeometry()
    w = u.FakeWriter(geom)

    tp = titles.TitlePage({
        "title" : ["ACME", "PART TWO"],
        "credit" : ["Written by"],
        "author" : ["J. Doe"],
        "draft date" : ["1/1/2020"],
        "contact" : ["Somewhere", "555-1234"],
        })
    tp.generate(w, geom)

    assert tp.title == "ACME PART TWO"
    assert w.texts(0) == ["ACME", "PART TWO", "Written by", "J. Doe",
                          "1/1/2020", "Somewhere", "555-1234"]

    top = 792.0 / 3.0
    assert w.find("ACME")[1].y == top
    assert w.find("PART TWO")[1].y == top + 12.0
    assert w.find("Written by")[1].y == top + 36.0
    assert w.find("J. Doe")[1].y == top + 60.0
    assert w.find("J. Doe")[1].align == util.ALIGN_CENTER

    corner = w.find("555-1234")[1]
    assert corner.align == util.ALIGN_LEFT
    assert corner.x == 72.0
    assert corner.y + 12.0 == geom.printableBottomY
    assert w.find("1/1/2020")[1].y == geom.printableBottomY - 48.0
