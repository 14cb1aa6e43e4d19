from dotgraph import AttrList, AttrType, Edge, Graph, GraphType, Identity, StmtList, SubGraph
from dotgraph import attributes as A

build = (
    StmtList()
    .add_attr(AttrType.GRAPH, AttrList().add_pair(A.label("build")).add_pair(A.style("dashed")))
    .add_edge(Edge.head_node("checkout") >> "compile" >> "test")
)

deploy = (
    StmtList()
    .add_attr(AttrType.GRAPH, AttrList().add_pair(A.label("deploy")))
    .add_node("staging")
    .add_node("production", attrs=AttrList().add_pair(A.shape(A.Shape.DOUBLECIRCLE)))
)

stmts = (
    StmtList()
    .add_equation("rankdir", "LR")
    .add_attr(AttrType.NODE, AttrList().add_pair(A.shape(A.Shape.BOX)).add_pair(A.fontname("Sans")))
    .add_subgraph(SubGraph.subgraph("cluster_build", build))
    .add_subgraph(SubGraph.subgraph("cluster_deploy", deploy))
    .add_edge(
        Edge.head_node("test")
        .arrow_to_node("staging")
        .add_attrpair(A.color(A.Color.DARKGREEN))
        .add_attrpair(A.label("green build"))
    )
    .add_edge(
        Edge.head_node("staging")
        .arrow_to_node("production")
        .add_attrpair(A.penwidth(2))
        .add_attrpair(A.arrowhead(A.ArrowShape.VEE))
    )
)

release = Graph.builder().graph_type(GraphType.DIGRAPH).id(Identity.quoted("release pipeline")).stmts(stmts).build()
