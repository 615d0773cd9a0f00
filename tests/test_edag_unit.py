from edag import Node, dump, to_graph
from parser import parse


def test_graph_shape():
    dag = to_graph(parse("max(1, 2)+x"))
    assert dag.size() == 5
    assert dag.depth() == 2
    assert dag.g.out_degree(dag.root) == 2


def test_leaf_has_depth_zero():
    assert to_graph(parse("3")).depth() == 0


def test_labels():
    assert Node("UNARY", "").label() == "UnaryMinus"
    assert Node("CONSTANT", "PI").label() == "Constant: PI"


def test_dump_is_preorder_and_indented():
    text = dump(parse("-cos(PI)*2"))
    assert text.splitlines() == [
        "BinOp: Multiply",
        "  UnaryMinus",
        "    Function: cos",
        "      Constant: PI",
        "  Number: 2",
    ]


def test_dump_custom_indent():
    assert dump(parse("x^2^3"), indent=1) == "\n".join([
        "BinOp: Power",
        " Monomial: 1 x^1",
        " BinOp: Power",
        "  Number: 2",
        "  Number: 3",
    ])
