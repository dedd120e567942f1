"""Textual CSS themes for bookshelf."""

APP_CSS = """
/* ── Global ────────────────────────────────── */
Screen {
    background: $surface;
}

/* ── Library Screen ────────────────────────── */
#library-header {
    dock: top;
    height: 3;
    padding: 1 2;
    background: $primary;
    color: $text;
    text-style: bold;
}

#search-bar {
    dock: top;
    height: 3;
    padding: 0 2;
    background: $surface-darken-1;
    display: none;
}

#search-input {
    width: 100%;
}

#book-table {
    height: 1fr;
}

#empty-state {
    height: 1fr;
    content-align: center middle;
    color: $text-muted;
    display: none;
}

/* ── Book Forms ────────────────────────────── */
.form-dialog {
    width: 70;
    height: auto;
    background: $surface;
    border: solid $primary;
    padding: 1 2;
}

.form-title {
    text-align: center;
    text-style: bold;
    width: 100%;
    margin-bottom: 1;
}

.form-row {
    height: 3;
    margin-bottom: 1;
}

.form-row Label {
    width: 10;
    padding: 1 0;
}

.form-row Input {
    width: 1fr;
}

.form-buttons {
    align: center middle;
    height: 3;
}

.form-buttons Button {
    margin: 0 2;
}
"""
