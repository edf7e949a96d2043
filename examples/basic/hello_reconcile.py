"""Build two generations by hand and reconcile them."""

from gentree import LinearDocument, NodeFactory, reconcile

factory = NodeFactory()
hello = factory.branch("paragraph", [factory.leaf("Hello")])
gen0 = factory.branch("doc", [hello])

factory.advance()
gen1 = factory.branch("doc", [hello, factory.branch("paragraph", [factory.leaf("world")])])

patches = reconcile(factory, gen0, gen1)
print(patches)

surface = LinearDocument.from_root(gen0)
surface.apply_all(patches)
print(surface.render())
print("In sync:", surface.matches(gen1))
