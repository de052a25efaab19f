"""Drive the engine the way an editor keymap does: chord in, edit out."""

from tablero import command_for_chord, run_table_command

text = "| A | B |\n| --- | --- |\n| 1 | 2 |"
cursor = text.index("1")

for chord in ["Tab", "Ctrl-Shift-A", "Ctrl-Shift-\\", "Ctrl-Shift-Enter", "Ctrl-Shift-Backspace"]:
    result = run_table_command(text, cursor, command_for_chord(chord))
    if result is None:
        print(f"{chord}: not applicable")
        continue
    text, cursor = result.text, result.cursor_pos
    print(f"{chord}: {result.message or 'moved'}")

print()
print(text)
