import ast

import pytest

from cli.glossa.classifier.classifier import Classifier, is_glossary_term
from cli.glossa.classifier.declaration import Declaration, decorator_name
from cli.glossa.classifier.definition import DESCRIPTION_NOT_FOUND, Definition


class FakeAnnotated:
    def __init__(self, *names):
        self.names = list(names) if names else ["GlossaryTerm"]

    def annotation_names(self):
        return self.names


class FakeDocumented:
    def __init__(self, text=""):
        self.text = text

    def doc_comment(self):
        return self.text


class FakeUndocumented:
    def doc_comment(self):
        return None


class FakeNamed:
    def __init__(self, name="Simple"):
        self.name = name

    def simple_name(self):
        return self.name


def classifier(annotated=None, documented=None, named=None):
    return Classifier(
        Declaration(
            annotated or FakeAnnotated(),
            documented or FakeDocumented(),
            named or FakeNamed(),
        )
    )


def test_declaration_requires_annotated():
    with pytest.raises(TypeError):
        Declaration(None, FakeDocumented(), FakeNamed())


def test_declaration_requires_documented():
    with pytest.raises(TypeError):
        Declaration(FakeAnnotated(), None, FakeNamed())


def test_declaration_requires_named():
    with pytest.raises(TypeError):
        Declaration(FakeAnnotated(), FakeDocumented(), None)


def test_classifier_requires_declaration():
    with pytest.raises(TypeError):
        Classifier(None)


def test_classifier_can_have_documentation():
    assert classifier().has_documentation()


def test_empty_docstring_still_counts_as_documentation():
    assert classifier(documented=FakeDocumented("")).has_documentation()


def test_classifier_does_not_require_documentation():
    assert not classifier(documented=FakeUndocumented()).has_documentation()


def test_classifier_can_have_marker():
    assert classifier().has_glossary_term_annotation()


def test_classifier_does_not_require_marker():
    assert not classifier(annotated=FakeAnnotated("dataclass")).has_glossary_term_annotation()


def test_marker_match_is_exact_and_case_sensitive():
    for names in (("glossaryterm",), ("GlossaryTerms",), ("Glossary",)):
        assert not classifier(annotated=FakeAnnotated(*names)).has_glossary_term_annotation()


def test_other_annotations_do_not_matter():
    c = classifier(annotated=FakeAnnotated("dataclass", "GlossaryTerm", "total_ordering"))
    assert c.has_glossary_term_annotation()


def test_custom_marker():
    d = Declaration(FakeAnnotated("Term"), FakeDocumented(), FakeNamed())
    assert Classifier(d, marker="Term").has_glossary_term_annotation()
    assert not Classifier(d).has_glossary_term_annotation()
    assert is_glossary_term(d, "Term")


def test_classifier_can_be_described_by_a_definition():
    description = "Acts as a classifier with a docstring."
    name = "FakeClassifier"
    c = classifier(documented=FakeDocumented(description), named=FakeNamed(name))
    assert c.definition() == Definition(name, description)


def test_definition_falls_back_without_docstring():
    c = classifier(documented=FakeUndocumented(), named=FakeNamed("Alpha"))
    assert c.definition() == Definition("Alpha", DESCRIPTION_NOT_FOUND)
    assert DESCRIPTION_NOT_FOUND == "Description not found"


def test_definition_does_not_need_marker():
    c = classifier(annotated=FakeAnnotated("other"), documented=FakeDocumented("Text."))
    assert c.definition() == Definition("Simple", "Text.")


def test_definition_excludes_tags():
    doc = """A shopping cart.

    :param items: the items
    :returns: nothing
    """
    c = classifier(documented=FakeDocumented(doc), named=FakeNamed("Cart"))
    assert c.definition() == Definition("Cart", "A shopping cart.")


def test_facets_may_alias_one_class_definition():
    tree = ast.parse(
        '@marker.GlossaryTerm\n'
        'class Widget:\n'
        '    """A small reusable component."""\n'
    )
    d = Declaration.from_class_def(tree.body[0], "pkg/widget.py")
    assert d.annotated is d.documented is d.named
    assert d.name() == "Widget"
    assert d.location() == "pkg/widget.py:2"
    assert Classifier(d).definition() == Definition("Widget", "A small reusable component.")


def test_decorator_names():
    tree = ast.parse(
        "@GlossaryTerm()\n"
        "@a.b.Marker\n"
        "@registry['x']\n"
        "class C: pass\n"
    )
    names = [decorator_name(d) for d in tree.body[0].decorator_list]
    assert names == ["GlossaryTerm", "Marker", None]


def test_docstring_is_parsed_on_demand():
    calls = []

    class CountingDocumented:
        def doc_comment(self):
            calls.append(1)
            return "Counted."

    c = classifier(documented=CountingDocumented())
    assert calls == []
    assert c.definition().description == "Counted."
    assert calls == [1]


def test_definition_is_immutable_value():
    d = Definition("A", "b")
    assert d == Definition("A", "b")
    assert d != Definition("A", "c")
    with pytest.raises(Exception):
        d.term = "B"


def test_marker_decorator_has_no_effect():
    from cli.glossa.marker import GlossaryTerm

    @GlossaryTerm
    class Plain:
        pass

    @GlossaryTerm()
    class Called:
        pass

    assert Plain.__name__ == "Plain"
    assert Called.__name__ == "Called"


def test_location_is_none_for_facets_without_one():
    assert Declaration(FakeAnnotated(), FakeDocumented(), FakeNamed()).location() is None


def test_location_is_delegated_to_named_facet():
    class LocatedNamed(FakeNamed):
        def location(self):
            return "shop.py:7"

    d = Declaration(FakeAnnotated(), FakeDocumented(), LocatedNamed("Cart"))
    assert d.location() == "shop.py:7"
