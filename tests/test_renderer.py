from pager.models.paging import LinkDescriptor, LinkKind
from pager.services.renderer import render_link, render_links, template


def _link(kind, page, label=None, rel=None):
    return LinkDescriptor(kind=kind, page_number=page, label=label or str(page), rel=rel)


def test_current_link_has_no_target():
    assert render_link(_link(LinkKind.CURRENT, 3), "/x?", "s") == '<a class="current" href="#">3</a>'


def test_page_links_with_and_without_rel():
    assert render_link(_link(LinkKind.PAGE, 4, rel="next"), "/x?", "s") == '<a rel="next" href="/x?s=4">4</a>'
    assert render_link(_link(LinkKind.PAGE, 2, rel="prev"), "/x?", "s") == '<a rel="prev" href="/x?s=2">2</a>'
    assert render_link(_link(LinkKind.PAGE, 7), "/x?q=1&amp;", "s") == '<a href="/x?q=1&amp;s=7">7</a>'


def test_navigation_links_carry_class_and_rel():
    assert render_link(_link(LinkKind.FIRST, 1, "«"), "/x?", "s") == (
        '<a class="first" rel="first" href="/x?s=1">«</a>'
    )
    assert render_link(_link(LinkKind.LAST, 9, "»"), "/x?", "page") == (
        '<a class="last" rel="last" href="/x?page=9">»</a>'
    )


def test_labels_are_escaped():
    assert render_link(_link(LinkKind.CURRENT, 1, "<b>1</b>"), "/x?", "s") == (
        '<a class="current" href="#">&lt;b&gt;1&lt;/b&gt;</a>'
    )


def test_template():
    assert template(["a", "b"]) == '<ul class="pager"><li>a</li><li>b</li></ul>'
    assert template(["a"], "nav", center=True) == '<ul class="nav center"><li>a</li></ul>'
    assert template([]) == '<ul class="pager"></ul>'


def test_render_links_keeps_order():
    links = [_link(LinkKind.CURRENT, 1), _link(LinkKind.PAGE, 2, rel="next")]
    assert render_links(links, "/x?", "s") == [
        '<a class="current" href="#">1</a>',
        '<a rel="next" href="/x?s=2">2</a>',
    ]
