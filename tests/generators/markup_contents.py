import hypothesis.strategies as st

whitespace = st.text(alphabet=" \t\n\r", min_size=1, max_size=3)

names = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1, max_size=8
)

# Characters that drive the tokenizer into its different branches.
markup_alphabet = st.sampled_from(list("<>/!?=\"'\\ \t\n-[]abxmlCDATOYPE"))

fragments = st.sampled_from(
    [
        "<!--",
        "-->",
        "<![CDATA[",
        "]]>",
        "<!DOCTYPE ",
        "<?xml ",
        "?>",
        "</",
        "/>",
        "<!",
        "<?",
        "<",
        ">",
        "=",
        '"',
        "'",
        '\\"',
    ]
)


@st.composite
def unquoted_values(draw):
    return draw(st.text(alphabet="abc123-_.:", max_size=6))


@st.composite
def quoted_values(draw):
    quote = draw(st.sampled_from(["'", '"']))
    value = draw(st.text(alphabet="abc <>/=-", max_size=6))
    return quote + value.replace(quote, "") + quote


@st.composite
def attributes(draw):
    key = draw(names)
    kind = draw(st.sampled_from(["boolean", "quoted", "unquoted"]))
    if kind == "boolean":
        return key
    if kind == "quoted":
        return key + "=" + draw(quoted_values())
    return key + "=" + draw(unquoted_values())


@st.composite
def tags(draw):
    name = draw(names)
    attrs = draw(st.lists(attributes(), max_size=3))
    tag = "<" + name
    for attr in attrs:
        tag += draw(whitespace) + attr
    closing = draw(st.sampled_from([">", "/>", " />"]))
    return tag + closing


@st.composite
def well_formed_markup(draw):
    """
    Concatenation of complete constructs, none of which produce errors.
    """
    pieces = draw(
        st.lists(
            st.one_of(
                tags(),
                names.map(lambda n: "</" + n + ">"),
                st.text(alphabet="abc \n&;", min_size=1, max_size=8),
                names.map(lambda n: "<!--" + n + "-->"),
                names.map(lambda n: "<![CDATA[" + n + "]]>"),
                names.map(lambda n: "<!DOCTYPE " + n + ">"),
                names.map(lambda n: '<?xml version="' + n + '"?>'),
            ),
            max_size=10,
        )
    )
    return "".join(pieces)


markup_soup = st.lists(
    st.one_of(fragments, st.text(markup_alphabet, max_size=5)), max_size=20
).map("".join)
