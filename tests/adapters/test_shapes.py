from prop_ordering.adapters import (
    AttributeShape,
    MemberShape,
    ParameterShape,
    create_document,
)
from prop_ordering.adapters.parameters import is_component
from prop_ordering.adapters.tree_sitter_support import JavaScriptDocument, TsxDocument, TypeScriptDocument


def matches(shape, code, ext="tsx"):
    doc = create_document(code, ext)
    out = []
    for node in doc.walk_tree():
        if node.type in shape.node_types:
            m = shape.extract(node, doc)
            if m is not None:
                out.append((m, doc))
    return out


def field_names(match):
    return [f.name for f in match.fields]


def field_texts(match, doc):
    return [doc.text[f.start:f.end] for f in match.fields]


def test_grammar_selection():
    assert isinstance(create_document("", "ts"), TypeScriptDocument)
    assert isinstance(create_document("", ".MTS"), TypeScriptDocument)
    assert isinstance(create_document("", "tsx"), TsxDocument)
    assert isinstance(create_document("", "jsx"), JavaScriptDocument)
    assert isinstance(create_document("", "cjs"), JavaScriptDocument)
    assert isinstance(create_document("", "vue"), TsxDocument)


def test_byte_to_char_position_with_multibyte_text():
    text = 'const s = "é😀"; const t = 1;'
    doc = create_document(text, "ts")
    raw = text.encode("utf-8")
    for char_pos in range(len(text) + 1):
        byte_pos = len(text[:char_pos].encode("utf-8"))
        assert doc.byte_to_char_position(byte_pos) == char_pos
    # inside the emoji: position before it
    emoji_byte = raw.index("😀".encode("utf-8"))
    assert doc.byte_to_char_position(emoji_byte + 2) == text.index("😀")
    assert doc.byte_to_char_position(len(raw) + 5) == len(text)


def test_node_ranges_are_char_offsets():
    code = 'const x = <Comp label="ü" b={1} a={2} />;'
    [(m, doc)] = matches(AttributeShape(), code)
    assert field_texts(m, doc) == ['label="ü"', "b={1}", "a={2}"]


# ---- parameters ----

def test_parameter_entries_of_function_declaration():
    code = "function Button({ onClick, id, disabled = false, variant }) { return null; }"
    [(m, doc)] = matches(ParameterShape(), code)
    assert field_names(m) == ["onClick", "id", "disabled", "variant"]
    assert [f.has_default_or_optional for f in m.fields] == [False, False, True, False]
    assert field_texts(m, doc) == ["onClick", "id", "disabled = false", "variant"]
    assert m.container == "component"
    assert m.is_component


def test_parameter_arrow_function_with_type_annotation_and_rest():
    code = "const Card = ({ title, ...rest }: CardProps) => <div />;"
    [(m, doc)] = matches(ParameterShape(), code)
    assert field_names(m) == ["title", None]
    assert m.fields[1].is_rest
    assert field_texts(m, doc) == ["title", "...rest"]


def test_parameter_renamed_entry_with_default():
    code = "function f({ b: beta = 2, a }) {}"
    [(m, _)] = matches(ParameterShape(), code, "js")
    assert field_names(m) == ["b", "a"]
    assert m.fields[0].has_default_or_optional


def test_parameter_defaulted_pattern_in_javascript():
    code = "function f({ b, a } = {}) {}"
    [(m, _)] = matches(ParameterShape(), code, "js")
    assert field_names(m) == ["b", "a"]


def test_parameter_needs_two_entries_and_a_pattern():
    assert matches(ParameterShape(), "function A({ only }) {}") == []
    assert matches(ParameterShape(), "function A(props, { b, a }) {}") == []
    assert matches(ParameterShape(), "const f = x => x;") == []


def test_component_heuristic_is_advisory():
    code = "function helper({ b, a }) { return b + a; }"
    [(m, _)] = matches(ParameterShape(), code)
    assert not m.is_component
    assert field_names(m) == ["b", "a"]


def test_component_heuristic():
    doc = create_document(
        "const row = ({ b, a }) => (<tr />);\nfunction Panel({ b, a }) { return 1; }\n",
        "tsx",
    )
    funcs = [n for n in doc.walk_tree() if n.type in ("arrow_function", "function_declaration")]
    assert [is_component(f, doc) for f in funcs] == [True, True]


# ---- attributes ----

def test_attributes_exclude_spread():
    code = "const x = <Comp {...rest} b=\"2\" a=\"1\" c={3} />;"
    [(m, doc)] = matches(AttributeShape(), code)
    assert field_names(m) == ["b", "a", "c"]
    assert "{...rest}" not in field_texts(m, doc)
    assert m.container == "element"


def test_attribute_shorthand_and_multiline():
    code = "const x = (\n  <Input\n    disabled\n    style={{\n      a: 1,\n    }}\n    value=\"v\"\n  />\n);"
    [(m, _)] = matches(AttributeShape(), code)
    assert field_names(m) == ["disabled", "style", "value"]
    assert [f.has_explicit_value for f in m.fields] == [False, True, True]
    assert [f.is_multiline for f in m.fields] == [False, True, False]


def test_attributes_of_opening_element():
    code = "const x = <div b=\"1\" a=\"2\">text</div>;"
    [(m, _)] = matches(AttributeShape(), code, "jsx")
    assert field_names(m) == ["b", "a"]


def test_single_attribute_is_not_a_list():
    assert matches(AttributeShape(), "const x = <div a=\"1\" {...p} />;") == []


# ---- members ----

def test_interface_members_skip_methods_and_index_signatures():
    code = (
        "interface Props {\n"
        "  onClick: () => void;\n"
        "  [key: string]: unknown;\n"
        "  render(): void;\n"
        "  id: string;\n"
        "  label?: string;\n"
        "}\n"
    )
    [(m, doc)] = matches(MemberShape(), code, "ts")
    assert field_names(m) == ["onClick", "id", "label"]
    assert [f.has_default_or_optional for f in m.fields] == [False, False, True]
    assert field_texts(m, doc)[0] == "onClick: () => void"
    assert m.container == "interface"


def test_type_alias_object_type():
    code = "type Props = { b: number; 'a-b'?: string };"
    [(m, _)] = matches(MemberShape(), code, "ts")
    assert field_names(m) == ["b", "a-b"]
    assert m.container == "type"


def test_type_alias_of_other_shapes_is_ignored():
    assert matches(MemberShape(), "type U = A | B;", "ts") == []
    assert matches(MemberShape(), "type One = { a: string };", "ts") == []
