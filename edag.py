from __future__ import annotations
import networkx as nx
from dataclasses import dataclass
from typing import Any, List, Optional

from expr import BinOp, Constant, Expr, Function, Monomial, Number, UnaryMinus, format_number

# Graph view of an Expr tree leveraging networkx.DiGraph (parent -> child edges)
@dataclass
class Node:
	type: str  # 'NUMBER','UNARY','BINOP','FUNCTION','MONOMIAL','CONSTANT'
	symbol: str
	value: Any = None

	def label(self) -> str:
		names = {
			'NUMBER': 'Number',
			'UNARY': 'UnaryMinus',
			'BINOP': 'BinOp',
			'FUNCTION': 'Function',
			'MONOMIAL': 'Monomial',
			'CONSTANT': 'Constant',
		}
		if self.symbol == '':
			return names[self.type]
		return f"{names[self.type]}: {self.symbol}"

class EDAG:
	def __init__(self) -> None:
		self.g = nx.DiGraph()
		self.root: Optional[str] = None
		self._id = 0
	def _nid(self) -> str:
		self._id += 1
		return f"n{self._id}"
	def _add(self, node: Node) -> str:
		n = self._nid()
		self.g.add_node(n, data=node)
		return n
	def add_expr(self, e: Expr) -> str:
		if isinstance(e, Number):
			return self._add(Node('NUMBER', format_number(e.value), e.value))
		if isinstance(e, UnaryMinus):
			n = self._add(Node('UNARY', ''))
			self.g.add_edge(n, self.add_expr(e.inner))
			return n
		if isinstance(e, BinOp):
			n = self._add(Node('BINOP', e.op.name.title(), e.op))
			self.g.add_edge(n, self.add_expr(e.lhs))
			self.g.add_edge(n, self.add_expr(e.rhs))
			return n
		if isinstance(e, Function):
			n = self._add(Node('FUNCTION', e.name))
			for arg in e.args:
				self.g.add_edge(n, self.add_expr(arg))
			return n
		if isinstance(e, Monomial):
			sym = f"{format_number(e.coefficient)} {e.variable}^{format_number(e.exponent)}"
			return self._add(Node('MONOMIAL', sym, e))
		if isinstance(e, Constant):
			return self._add(Node('CONSTANT', e.name, e.value))
		raise ValueError('Unknown node type')
	def node(self, nid: str) -> Node:
		return self.g.nodes[nid]['data']
	def size(self) -> int:
		return self.g.number_of_nodes()
	def depth(self) -> int:
		if self.root is None:
			return 0
		return max(nx.single_source_shortest_path_length(self.g, self.root).values())
	def lines(self, indent: int = 2) -> List[str]:
		if self.root is None:
			return []
		levels = nx.single_source_shortest_path_length(self.g, self.root)
		return [
			" " * (indent * levels[nid]) + self.node(nid).label()
			for nid in nx.dfs_preorder_nodes(self.g, self.root)
		]

def to_graph(e: Expr) -> EDAG:
	dag = EDAG()
	dag.root = dag.add_expr(e)
	return dag

def dump(e: Expr, indent: int = 2) -> str:
	return "\n".join(to_graph(e).lines(indent))
