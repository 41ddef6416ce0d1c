from spotify_tui.help import HelpEntry, get_help_docs


def test_first_and_last_entries():
    docs = get_help_docs()
    assert docs[0] == HelpEntry("Jump to currently playing album", "a", "General")
    assert docs[-1] == HelpEntry("Follow an artists", "w", "Search result")


def test_contexts_are_grouped_in_order():
    seen = []
    for entry in get_help_docs():
        if not seen or seen[-1] != entry.context:
            seen.append(entry.context)
    assert seen == [
        "General",
        "Selected block",
        "Search input",
        "Pagination",
        "Library -> Albums",
        "Search result",
    ]


def test_entries_have_all_fields():
    docs = get_help_docs()
    assert docs
    assert all(entry.description and entry.event and entry.context for entry in docs)


def test_returns_fresh_list():
    first = get_help_docs()
    first.clear()
    assert get_help_docs()
    assert get_help_docs() == get_help_docs()


def test_search_binding_listed():
    events = {entry.description: entry.event for entry in get_help_docs()}
    assert events["Enter input for search"] == "/"
    assert events["Toggle shuffle"] == "<Ctrl+s>"