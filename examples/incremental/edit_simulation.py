"""Re-parse only what changed, then patch only what changed."""

from gentree import EditSession, format_tree

original = "= Title\n\nFirst para.\n\nSecond para."
session = EditSession(original)
before = session.current_root

# User edits "First para." -> "First paragraph."
edit_start = len("= Title\n\nFirst ")
edit_end = len("= Title\n\nFirst para")
patches = session.edit(edit_start, edit_end, "paragraph")
after = session.current_root

print("Heading unchanged (same object?):", before.children[0] is after.children[0])
print("Second paragraph unchanged (same object?):", before.children[2] is after.children[2])
print("First paragraph rebuilt:", before.children[1] is not after.children[1])
print()
print("Patches:")
for patch in patches:
    print(" ", patch)
print()
print("Surface:", session.document.render())
print()
print(format_tree(session.factory, after))
