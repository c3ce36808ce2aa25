"""Help topics shown by the `help` command."""

HELP_TOPICS = {
    "alias": """Syntax:
    ALIAS [<name>] [<command>]

Description:
    Without arguments, show all aliases.
    With <name>, show the command of this alias.
    With <name> and <command>, define the alias. Typing <name> will then
    execute <command>.
    Example: alias b back""",
    "authors": """Credit goes to the following people:

Sebastian Steinhauer <s.steinhauer@yahoo.de>""",
    "back": """Syntax:
    BACK

Description:
    Go back in history.""",
    "bookmarks": """Syntax:
    BOOKMARKS [<item-id>]

Description:
    Show all defined bookmarks.
    If <item-id> is specified, navigate to the given <item-id> from bookmarks.


Syntax:
    BOOKMARKS <name> <url>

Description:
    Define a new bookmark with the given <name> and <url>.""",
    "commands": None,
    "help": """Syntax:
    HELP [<topic>]

Description:
    Show all help topics or the help text for a specific <topic>.""",
    "history": """Syntax:
    HISTORY [<item-id>]

Description:
    Show the current history.
    If <item-id> is specified, navigate to the given <item-id> from history.""",
    "license": """delve - a simple terminal gopher client
Copyright (C) 2019  Sebastian Steinhauer

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.""",
    "open": """Syntax:
    OPEN <url>

Description:
    Opens the given <url> as a gopher menu.""",
    "quit": """Syntax:
    QUIT

Description:
    Quit the gopher client.""",
    "save": """Syntax:
    SAVE <item-id>

Description:
    Saves the given <item-id> from the menu to the disk.
    You will be asked for a filename.""",
    "see": """Syntax:
    SEE <item-id>

Description:
    Show the full gopher URL for the menu selector id.""",
    "set": """Syntax:
    SET [<name>] [<value>]

Description:
    If no <name> is given it will show all variables.
    When <name> is given it will show this specific variable.
    If <value> is specified the variable will have this value.
    When the variable does not exist the variable will be created.
    Variables are used in commands as $<name>.""",
    "show": """Syntax:
    SHOW [<filter>]

Description:
    Show the current gopher menu. If a <filter> is specified, it will
    show all selectors containing the <filter> in name or path.""",
    "type": """Syntax:
    TYPE [<type>] [<command>]

Description:
    Without arguments, show all type handlers.
    With <type>, show the handler for this selector type.
    With <type> and <command>, define the command executed when a selector
    of type <type> is opened.
    Example: type 0 "less %f"
    Format specifiers:
        %h - hostname
        %p - port
        %s - selector
        %n - name
        %f - temporary file (selector will be downloaded)
        %% - escape %""",
}


def format_columns(names, width: int = 13, per_row: int = 5) -> str:
    """Lay out names in fixed-width columns."""
    rows = []
    names = list(names)
    for start in range(0, len(names), per_row):
        row = names[start:start + per_row]
        rows.append(" ".join(f"{name:<{width}}" for name in row).rstrip())
    return "\n".join(rows)
