# pageformat

A small interactive formatter for plain-text files. It rewrites a file in
place: line breaks are dropped, runs of spaces are squeezed into one, and the
text is cut into lines of a fixed width (40 characters by default). After every
40 lines a page number is written, and chosen lines can be indented by three
spaces as paragraph starts.

The file is changed on disk, so keep a copy of anything you care about.

## Installation

```
pip install .
```

## Usage

```
pageformat [path] [--width N]
```

If `path` is left out you are asked for a file name; the prompt repeats until
you give the name of a file that can be opened. `--width` sets the starting
line width (1 to 99, default 40).

On start the file is flattened straight away (line breaks removed, spaces
squeezed) and that flattened text is remembered as the saved copy. Then the
menu appears:

```
  ** Formatter **

  1 - Select file
  2 - Clean all file
  3 - Change string length
  4 - No format
  5 - Format
  6 - Paragraph
  0 - Exit
```

- **1** asks for another file name and switches to that file. The saved copy
  is dropped, so later formatting works on the new file as it stands.
- **2** empties the current file.
- **3** asks for a new line width. A value outside 1 to 99, or one that is not
  a number, prints ` Error ` and keeps the old width; the file is reformatted
  either way.
- **4** forgets all paragraph indents and reformats the file.
- **5** reformats the file, starting from the saved copy when there is one.
- **6** asks for a line number of the last layout and indents that line by
  three spaces, then reformats. An out-of-range number prints ` Error `.
- **0**, or the end of input, quits.

The page number is written on its own line, padded with nine spaces, after
each block of 40 lines and after the last, partly filled page.

You can also start the menu with `python -m pageformat.cli`.

## Using it from Python

```python
from pageformat.formatter import Formatter, FormatterError, collapse_text, format_text

collapse_text("  vvedite     text")      # " vvedite text"

fmt = Formatter("notes.txt", 40)
fmt.no_format()        # join lines and squeeze spaces in place
fmt.save()             # remember the current contents
fmt.set_width(60)      # change the width (does not touch the file)
fmt.format()           # restore the saved copy, lay it out, write it back
fmt.add_paragraph(3)   # indent line 3 at the next format()
fmt.format()
fmt.reset_paragraphs() # forget every indent
fmt.restore()          # write the saved copy back unchanged
fmt.clear()            # empty the file
```

`format_text(text, width, paragraphs)` returns the formatted text without
touching any file; `paragraphs` holds zero-based line indexes to indent.
Files that cannot be opened, widths outside 1 to 99 and line numbers outside
the last layout raise `FormatterError`.

## What it does not do

There is no undo other than the single saved copy held in memory, and no
backup file is written. Text is read and written as UTF-8; no other encodings
are handled.

## Running the tests

```
pip install .[test]
pytest
```