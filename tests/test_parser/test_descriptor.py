from optgrid.parser import DEFAULT_GROUP, OPTION_END, VARIADIC, OptionDescriptor, OptionKind


def test_hints_accept_plain_string():
    descriptor = OptionDescriptor(long="output", arity=1, hints="<file>", description="d")
    assert descriptor.hints == ("<file>",)


def test_hints_accept_list():
    descriptor = OptionDescriptor(
        long="add", arity=2, hints=["<money>", "<item>"], description="d"
    )
    assert descriptor.hints == ("<money>", "<item>")


def test_identifiers_order():
    descriptor = OptionDescriptor(short="n", long="now", keyword="today", description="d")
    assert descriptor.identifiers == ("-n", "--now", "today")


def test_signature_boolean():
    descriptor = OptionDescriptor(short="v", long="verbose", description="d")
    assert descriptor.get_hint_text() == ""
    assert descriptor.get_signature_text() == "-v, --verbose"


def test_signature_fixed():
    descriptor = OptionDescriptor(
        short="a", long="add", arity=2, hints=("<money>", "<item>"), description="d"
    )
    assert descriptor.get_signature_text() == "-a, --add <money> <item>"


def test_signature_variadic():
    descriptor = OptionDescriptor(long="tag", arity=VARIADIC, hints="<tag>", description="d")
    assert descriptor.get_signature_text() == "--tag <tag> [<tag> ...]"


def test_signature_keyword_only():
    descriptor = OptionDescriptor(keyword="push", arity=1, hints="<remote>", description="d")
    assert descriptor.get_signature_text() == "push <remote>"


def test_kind_and_takes_value():
    assert OptionDescriptor(short="v", description="d").kind is OptionKind.BOOLEAN
    fixed = OptionDescriptor(short="o", arity=1, hints="<f>", description="d")
    assert fixed.kind is OptionKind.FIXED
    assert fixed.takes_value


def test_group_label_defaults():
    assert OptionDescriptor(short="v", description="d").group_label == DEFAULT_GROUP
    assert OptionDescriptor(short="v", description="d", group="Debug").group_label == "Debug"


def test_end_sentinel():
    assert OPTION_END.is_end()
    assert OptionDescriptor().is_end()
    assert not OptionDescriptor(short="v").is_end()
    assert not OptionDescriptor(description="only text").is_end()
