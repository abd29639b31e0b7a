# cellshell

cellshell is a small interactive command shell. Its prompt shows the current
working directory. It reads a line, splits it into words on spaces and runs it.
It runs a few commands itself and starts everything else as a program.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running the shell

    cellshell

The prompt looks like `/home/me/project $> `. The shell takes no arguments. If
you pass any, it prints `This program does not accept arguments` and exits.
When standard input is a terminal, line editing and history are available if
Python's `readline` module can be loaded. At end of input, for example after
Ctrl-D, the shell prints `[EOF]` and exits.

Before the shell runs a line, it lists each word it found, one per line, in the
form `Token[0]: ls`.

The shell runs these commands itself:

- `echo WORDS...` prints the words separated by single spaces, followed by a
  newline.
- `env` prints the environment, one `NAME=value` per line.
- `exit` leaves the shell with status 0.

Any other command is started as a child process found on `PATH`, and the shell
waits for it to finish. If the program cannot be started, the shell prints an
error to standard error and reads the next line.

### What the shell does not do

The shell splits lines on spaces only. Quotes have no special meaning. Pipes,
redirections, `&&`, `||`, `;` and variable expansion are not supported. Words
such as `|` or `>` are passed to the command as ordinary arguments. There is no
`cd` command.

## Using the library

The shell's parts can be used on their own.

- `cellshell.shell`: `make_prompt(cwd)`, `read_line(input_fn)`,
  `split_line(line, out)` returns the list of words and writes the `Token[n]`
  listing to `out`, `launch(args)` runs a program and returns its exit status,
  `execute(args)` runs a builtin or a program, and `main(argv)` runs the loop.
- `cellshell.builtins`: `echo`, `env`, `exit_shell` and `find_builtin(name)`.
  `find_builtin` returns the builtin's function, or `None` if no builtin has
  that name.
- `cellshell.strings`: C-style string helpers. `substr`, `strjoin`, `strtrim`,
  `split` (drops empty words), `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strmapi` and `striteri`. The search functions return
  an index or `None`. `strlcpy` and `strlcat` return the new buffer text and
  the length that the full result would need.
- `cellshell.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` take a character or an integer code.
  The module also has `atoi` and `itoa`.
- `cellshell.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr` and
  `memcmp` work on `bytearray` buffers and raise `IndexError` when a span runs
  past the end of a buffer. `calloc` returns a zero-filled `bytearray`.
- `cellshell.linkedlist`: `LinkedList` is a singly linked list of `Node`
  objects. It provides `push_front`, `push_back`, `last`, `for_each`, `map`,
  `clear`, `len()` and iteration.
- `cellshell.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to
  a text stream. The default stream is standard output.

```python
from cellshell.strings import split, strtrim
from cellshell.linkedlist import LinkedList

words = split("  ls  -l  ", " ")          # ['ls', '-l']
name = strtrim("--name--", "-")           # 'name'
items = LinkedList([1, 2, 3]).map(lambda x: x * 2)
print(list(items))                        # [2, 4, 6]
```