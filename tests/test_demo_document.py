from bs4 import BeautifulSoup

from pagetree.blocks import TextBlock
from pagetree.demo import DEMO_CSS, build_demo_document, build_demo_renderer
from pagetree.elements import HtmlElement, TaglessElement, attributes
from pagetree.renderer import DocumentRenderer
from pagetree.tree import TreeNode

EXPECTED_DEMO = (
    "<!DOCTYPE html><html lang='en'><head>"
    "<meta charset='UTF-8'>"
    "<meta http-equiv='X-UA-Compatible' content='IE=edge'>"
    "<title>Yolo</title>"
    f"<style>{DEMO_CSS}</style>"
    "</head><body>"
    "<div class='container' id='container'>"
    "<div class='sidebar'>"
    "<div class='wishlist'>WishlistBlock</div>"
    "<div class='favourites'>FavouriteBlock</div>"
    "</div>"
    "<div class='content'></div>"
    "</div>"
    "</body></html>"
)


def test_demo_page_renders_exactly():
    assert build_demo_renderer().render() == EXPECTED_DEMO


def test_base_document_prefix():
    output = DocumentRenderer(build_demo_document()).render()
    assert output.startswith("<!DOCTYPE html><html lang='en'><head>")
    assert "<title>Yolo</title></head><body></body></html>" in output


def _minimal_page() -> TreeNode:
    return TreeNode.anonymous(TaglessElement()).add(
        TreeNode.anonymous(HtmlElement("!DOCTYPE", attributes("html"), self_closing=True)),
        TreeNode.anonymous(HtmlElement("html", {"lang": "en"})).add(
            TreeNode.named("head", HtmlElement("head")).add(
                TreeNode.anonymous(HtmlElement("title", block=TextBlock("Yolo"))),
            ),
        ),
    )


def test_minimal_page_renders_head_first():
    output = DocumentRenderer(_minimal_page()).render()
    assert output == "<!DOCTYPE html><html lang='en'><head><title>Yolo</title></head></html>"


def test_append_under_missing_body_is_byte_identical():
    renderer = DocumentRenderer(_minimal_page())
    before = renderer.render()

    container = TreeNode.anonymous(HtmlElement(attributes={"class": "container"}))
    renderer.append_node("body", container)

    assert renderer.render() == before


def test_demo_structure_parses_as_expected():
    soup = BeautifulSoup(build_demo_renderer().render(), "html.parser")
    sidebar = soup.find("div", class_="sidebar")
    assert [div["class"] for div in sidebar.find_all("div", recursive=False)] == [["wishlist"], ["favourites"]]
    assert soup.title.string == "Yolo"
    assert ".container .sidebar" in soup.style.string


def test_demo_css_starts_on_new_line():
    assert DEMO_CSS.startswith("\n    .container {")
    assert DEMO_CSS.endswith("    }\n")
