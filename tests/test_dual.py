import fountainpager.blocks as blocks
import fountainpager.dual as dual
import fountainpager.height as height
import fountainpager.pagebreak as pagebreak
import fountainpager.util as util

import u

PAIR = ["JOHN^", "Hello there.", "How are you?", "", "MARY",
        "Fine.", "And you?"]

def newLayout(**settings):
    cfg = u.newConfig(**settings)
    geom = cfg.getGeometry()
    opts = cfg.getOptions()

    w = u.FakeWriter(geom)
    est = height.HeightEstimator(w, geom)
    decider = pagebreak.PageBreakDecider(w, est, geom, opts)
    collector = blocks.BlockCollector()

    return dual.DualDialogueLayout(w, est, decider, collector, geom, opts)

def testColWidth():
    layout = newLayout()

    assert layout.colWidth() == (468.0 - 24.0) / 2.0

def testDetectMarkedLeft():
    layout = newLayout()
    left = layout.collector.collect(PAIR, 1)

    pair, nextIdx = layout.detect(PAIR, 0, left)

    assert pair.leftName == "JOHN"
    assert pair.leftBlock.texts() == ["Hello there.", "How are you?"]
    assert pair.rightName == "MARY"
    assert pair.rightBlock.texts() == ["Fine.", "And you?"]
    assert nextIdx == len(PAIR)

def testDetectMarkedRight():
    lines = ["JOHN", "Hi.", "", "MARY ^", "Hey.", "", "He leaves."]
    layout = newLayout()
    left = layout.collector.collect(lines, 1)

    pair, nextIdx = layout.detect(lines, 0, left)

    assert (pair.leftName, pair.rightName) == ("JOHN", "MARY")
    assert nextIdx == 5

def testDetectNotDual():
    lines = ["JOHN", "Hi.", "", "MARY", "Hey."]
    layout = newLayout()

    assert layout.detect(lines, 0, layout.collector.collect(lines, 1)) is None

def testDetectWithoutPartner():
    lines = ["JOHN^", "Hi.", "", "He leaves."]
    layout = newLayout()

    pair, nextIdx = layout.detect(lines, 0, layout.collector.collect(lines, 1))

    assert not pair.hasRight()
    assert nextIdx == 2

def testSideBySide():
    pager, w = u.paginate("\n".join(PAIR))

    assert len(w.pages) == 1
    assert w.find("(MORE)") is None

    pg1, john = w.find("JOHN")
    pg2, mary = w.find("MARY")

    assert pg1 == pg2 == 0
    assert john.y == mary.y == 72.0
    assert john.x == 72.0
    assert mary.x == 72.0 + 222.0 + 24.0
    assert john.align == mary.align == util.ALIGN_CENTER

    assert w.find("Hello there.")[1].y == w.find("Fine.")[1].y
    assert w.find("How are you?")[1].y == w.find("And you?")[1].y

def testCursorBelowTallerColumn():
    lines = ["JOHN^", "One.", "", "MARY", "One.", "Two.", "Three.", "",
             "He leaves."]
    pager, w = u.paginate("\n".join(lines))

    # four lines for the pair, one blank
    assert w.find("He leaves.")[1].y == 72.0 + 5 * 12.0

def testPairMovesTogether():
    # two lines of space left, the pair needs three
    lines = u.filler(u.LINES_ON_PAGE - 3) + [""] + PAIR
    pager, w = u.paginate("\n".join(lines))

    assert len(w.pages) == 2
    assert w.texts(0).count("(MORE)") == 1
    assert "JOHN" not in w.texts(0)
    assert "MARY" not in w.texts(0)

    pg, more = w.find("(MORE)")
    assert more.y == 72.0 + (u.LINES_ON_PAGE - 2) * 12.0

    pg1, john = w.find("JOHN (CONT'D)")
    pg2, mary = w.find("MARY (CONT'D)")

    assert pg1 == pg2 == 1
    assert john.y == mary.y == 72.0

    assert set(w.texts(1)) == {"JOHN (CONT'D)", "MARY (CONT'D)",
        "Hello there.", "How are you?", "Fine.", "And you?"}

def testPairMovesWithoutMarkers():
    lines = u.filler(u.LINES_ON_PAGE - 3) + [""] + PAIR
    pager, w = u.paginate("\n".join(lines), showMore = False,
                          showContd = False)

    assert w.find("(MORE)") is None
    assert w.find("JOHN")[0] == 1
    assert w.find("MARY")[0] == 1
