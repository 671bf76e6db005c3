# minishell

The parsing half of a small interactive shell, as a plain Python library.
It turns a line of shell input into a list of commands, each with its
arguments and redirections, and handles the pieces around that.

## What it covers

- **Tokenizing** (`minishell.tokenizer`): `smart_split` breaks a line into
  words and the operators `|`, `<`, `>`, `<<` and `>>`. Quotes are kept in
  the tokens, and an unclosed quote raises `UnmatchedQuoteError`.
- **Pipelines** (`minishell.pipes`): `split_by_pipes` cuts a line at every
  `|` that is not inside quotes and trims each segment.
- **Quoting and expansion** (`minishell.quotes`): `handle_quotes` strips the
  quotes from a token and expands `$NAME` and `$?` outside single quotes,
  using the variables and last exit status held in a `ParseContext`
  (`ParseContext.expand` does the expansion on its own).
  `remove_all_quotes` drops every quote character.
- **Syntax checks** (`minishell.syntax`): `validate_syntax` rejects a
  leading pipe, triple pipes and malformed redirection operators, sets the
  exit status to 2 and raises `ShellSyntaxError` with the shell's usual
  message.
- **Commands** (`minishell.ast`): `build_pipeline` produces a list of
  `Command` objects, each with its `command` name, `args` and a list of
  `Redirection` entries (`RedirType` tells input, output, append and
  here-document apart). `tokenize_input` parses a single segment.
- **Here-documents** (`minishell.heredoc`): `process_heredocs` reads the
  body of every `<<` redirection through a line-reading function you supply
  and stores it in `Redirection.content`. A `KeyboardInterrupt` from that
  function discards the bodies and sets the exit status to 130.
- **Reading input** (`minishell.line_reader`): `read_input` reads a line
  through a function you supply, rejects unclosed quotes, asks for more
  input when a line ends in `|`, `||` or `&&`, appends the result to a
  history list, and raises `EndOfInput` at the end of input.

Smaller helpers come along with it: number conversion with 32- and 64-bit
wrap-around (`minishell.numconv`), string splitting, trimming and
tokenizing (`minishell.strutil`), a compact `printf` formatter supporting
`%c %s %d %i %u %p %x %X %%` (`minishell.printf`) and `LineBuffer`, a line
reader over a text or binary stream (`minishell.gnl`).

## Examples

```python
from minishell.tokenizer import smart_split
from minishell.pipes import split_by_pipes

smart_split('echo "a b" > out.txt')
# ['echo', '"a b"', '>', 'out.txt']

split_by_pipes("ls -l | grep py")
# ['ls -l', 'grep py']
```

```python
from minishell.quotes import ParseContext
from minishell.ast import build_pipeline

ctx = ParseContext(env={"USER": "alice"})
commands = build_pipeline('echo "hi $USER" | cat > out.txt', ctx)
commands[0].args        # ['echo', 'hi alice']
commands[1].redirs[0]   # Redirection(kind=RedirType.OUT, target='out.txt', ...)
```

```python
from minishell.numconv import atoi, itoa
from minishell.strutil import split
from minishell.printf import format_printf

atoi("  -42abc")                      # -42
itoa(-7)                              # '-7'
split("a,,b,c", ",")                  # ['a', 'b', 'c']
format_printf("%d is %x", 255, 255)   # '255 is ff'
```

## What it does not do

This package only reads and parses. It does not run commands, resolve
programs on a path, open files for redirections, connect pipes between
processes, provide builtins such as `cd`, `export` or `exit`, or supply an
interactive prompt loop or a command to start one. Line input comes from
whatever function the caller passes in.

## Requirements

Python 3.10 or later. The package has no dependencies outside the
standard library; the tests use pytest (`pip install .[test]`).