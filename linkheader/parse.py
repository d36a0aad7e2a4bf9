# -*- coding: utf-8; -*-

"""A library of parser combinators based on the Earley algorithm.

The grammar defined with these combinators is in :mod:`linkheader.syntax`.

We use Earley -- instead of more mainstream approaches like LR(1) -- because
Earley can deal with any (context-free) grammar. So we can write the rules
almost exactly as they appear in the RFCs. We don't need to transform them,
add lookaheads and such; they just work. And we get precise, detailed error
messages, which tell the user *where* a header stopped making sense
and *what* could have been there instead.

Unlike the RFCs, whose terminal symbols are octets, we run on Unicode code
points. The ASCII and Latin-1 ranges are matched exactly. Everything beyond
that is matched by a single "wide" flag on each terminal, which is how
the grammar admits UTF-8 text inside values without enumerating it.

After parsing, the grammar's semantic actions are applied
(as specified with the ``<<`` operator, :meth:`Symbol.__rlshift__`).
The semantic actions convert parsed strings into objects that are more
suitable for further work -- mainly classes from :mod:`linkheader.structure`.

A semantic action can also produce complaints (notices), if it is decorated
with :func:`can_complain`. Complaints are collected during parsing and passed
to the caller's `complain` function only if the parse as a whole succeeds.

A semantic action can reject its input by raising :exc:`ValueError`
(for example, :exc:`UnicodeDecodeError`). This turns into a :exc:`ParseError`
for the entire input, positioned at the start of the rejected symbol.

Parsing is a pure function of its input: the grammar symbols are only read
while parsing, and no results are cached between calls.
"""

from collections import OrderedDict
import operator

from bitstring import BitArray, Bits

from linkheader.util.text import format_chars


###############################################################################
# The main interface to parsing.

def parse(data, symbol, complain=None):
    """Parse a Unicode string as a grammar symbol.

    :param data:
        The Unicode string to parse. It must match `symbol` in its entirety.
    :param symbol:
        The :class:`Symbol` to parse as.
    :param complain:
        If not `None`, this function will be called with any complaints
        produced while parsing (only if parsing was successful), like
        :meth:`linkheader.blackboard.Blackboard.complain`.

    :return:
        The result of parsing, after all semantic actions.

    :raises:
        :exc:`ParseError` if `data` does not match `symbol`.

    """
    (r, complaints) = _inner_parse(data, symbol.as_nonterminal())
    if complain is not None:
        for (notice_id, context) in complaints:
            complain(notice_id, **context)
    return r


class ParseError(ValueError):

    def __init__(self, position, expected, found=None, reason=None):
        """
        :param position: Character offset at which the error was encountered.
        :param expected:
            List of ``(description, symbols)``, where `description` is
            a free-form description of what could satisfy parse at that
            `position` in the input, and `symbols` is an iterable
            of :class:`Symbol` as part of which this `description` would be
            expected. `description` may be `None` if an entire symbol was
            expected at that `position` and no further detail is available.
        :param found:
            A string of length 1 or 0 (for end of input) that was found
            at `position`, or a longer string if a semantic action rejected
            that stretch of input, or `None` if irrelevant.
        :param reason:
            The exception raised by a semantic action, if that is what
            caused the failure.

        """
        if reason is None:
            message = u'unexpected input at position %r' % position
        else:
            message = u'invalid input at position %r: %s' % (position, reason)
        super(ParseError, self).__init__(message)
        self.position = position
        self.expected = expected
        self.found = found
        self.reason = reason

    def explain(self):
        """Describe this error as a list of plain-text lines."""
        lines = [u'Parse error at position %d.' % self.position]
        if self.reason is not None:
            lines.append(u'Rejected: %s' % self.found)
            lines.append(u'Reason: %s' % self.reason)
            return lines
        if self.found == u'':
            lines.append(u'Found end of data.')
        elif self.found is not None:
            lines.append(u'Found: %s' % format_chars([self.found]))

        lines.append(u'Expected:')
        for i, (option, symbols) in enumerate(self.expected):
            line = u'' if i == 0 else u'or '
            if option:
                line += option
                if symbols:
                    line += u' as part of '
            line += u' or '.join(symbol.describe() for symbol in symbols or [])
            lines.append(line)
        return lines


###############################################################################
# Combinators to construct a grammar suitable for the Earley algorithm.


class Symbol(object):

    """A symbol of the grammar (either terminal or nonterminal)."""

    def __init__(self, name=None, citation=None, is_pivot=False,
                 is_ephemeral=None):
        """
        :param name:
            The name of this symbol in the grammar, normally as specified
            in `citation`.
        :param citation:
            The :class:`~linkheader.citation.Citation` for the document that
            defines this symbol.
        :param is_pivot:
            `True` if this symbol is a meaningful enough block of the grammar
            to be shown to the user as part of a :exc:`ParseError` explanation
            (see :func:`_build_parse_error`).
        :param is_ephemeral:
            Whether this symbol is ephemeral. If `None`, this is determined
            heuristically. See :meth:`is_ephemeral`.

        """
        self.name = name
        self.citation = citation
        self.is_pivot = is_pivot
        self._is_ephemeral = is_ephemeral

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            self.name or hex(id(self)))

    def describe(self):
        if self.citation:
            return u'%s (%s)' % (self.name, self.citation)
        else:
            return u'%s' % self.name

    def __gt__(self, seal):
        """``sym >seal`` seals the `sym` symbol, then applies `seal` to it.

        This causes the symbol to be treated as a unit, with a specific name
        and (usually) citation. It will then never be inlined into other
        symbol's rules. This keeps the layout of `Symbol` objects close
        to the grammar as written in the RFCs, which matters for error
        reporting.

        See also :func:`fill_names`.

        """
        if self.name is None:
            sealed = self
        else:
            sealed = SimpleNonterminal(rules=[Rule((self,))])
        (sealed.name, sealed.citation, sealed.is_pivot) = seal
        return sealed

    @property
    def is_ephemeral(self):
        """Is it OK to inline this symbol into others (if possible)?

        Ephemeral symbols are a side effect of constructing a grammar using our
        combinators. For example, when we write::

            foo = bar | baz | qux           > auto

        we want `foo` to consist of three rules. But naturally Python
        interprets this as ``(bar | baz) | qux``, where ``bar | baz`` is
        an ephemeral symbol -- it needs to be "dissolved" in the rules
        for `foo`.

        """
        if self._is_ephemeral is None:
            return (self.name is None)
        else:
            return self._is_ephemeral

    def group(self):
        raise NotImplementedError

    def is_nullable(self):
        raise NotImplementedError

    def as_rule(self):
        raise NotImplementedError

    def as_rules(self):
        raise NotImplementedError

    def as_nonterminal(self):
        raise NotImplementedError

    def __or__(self, other):
        other = as_symbol(other)
        return SimpleNonterminal(rules=self.as_rules() + other.as_rules())

    def __ror__(self, other):
        other = as_symbol(other)
        return SimpleNonterminal(rules=other.as_rules() + self.as_rules())

    def __mul__(self, other):
        other = as_symbol(other)
        return SimpleNonterminal(
            rules=[self.as_rule().concat(other.as_rule())])

    def __rmul__(self, other):
        other = as_symbol(other)
        return SimpleNonterminal(
            rules=[other.as_rule().concat(self.as_rule())])

    def __rlshift__(self, func):
        """``func << sym`` wraps the result of parsing `sym` with `func`."""
        return SimpleNonterminal(
            rules=[rule.wrap(func) for rule in self.as_rules()])

    def __add__(self, other):
        return operator.add << self * other

    def __radd__(self, other):
        return operator.add << other * self

    def __mod__(self, other):
        return _continue_right_list << self * other


class Terminal(Symbol):

    """A terminal symbol of the grammar, matching some set of characters.

    Code points up to U+00FF are tracked individually in `bits`.
    All code points above that are matched or not matched together,
    according to `wide`.
    """

    def __init__(self, name=None, citation=None, bits=None, wide=False):
        super(Terminal, self).__init__(name, citation)
        self.bits = bits if bits is not None else Bits(length=256)
        self.wide = wide

    def chars(self):
        return [chr(i) for (i, v) in enumerate(self.bits) if v]

    def match(self, char):
        point = ord(char)
        if point < 256:
            return self.bits[point]
        return self.wide

    def group(self):
        return self

    def as_rule(self):
        return Rule((self,))

    def as_rules(self):
        return [self.as_rule()]

    def as_nonterminal(self):
        return SimpleNonterminal(rules=self.as_rules())

    def __or__(self, other):
        other = as_symbol(other)
        if isinstance(other, Terminal):
            return Terminal(bits=self.bits | other.bits,
                            wide=self.wide or other.wide)
        else:
            return super(Terminal, self).__or__(other)

    def __sub__(self, other):
        other = as_symbol(other)
        return Terminal(bits=self.bits ^ (self.bits & other.bits),
                        wide=self.wide and not other.wide)

    def is_nullable(self):
        return False


class Nonterminal(Symbol):

    """A nonterminal symbol of the grammar.

    Every nonterminal has a list of rules (:class:`Rule` objects)
    according to which it can be parsed.
    This list can be static (as in :class:`SimpleNonterminal`)
    or generated on the fly (as in :class:`RepeatedNonterminal`).
    """

    def __init__(self, name=None, citation=None, is_pivot=False,
                 is_ephemeral=None):
        super(Nonterminal, self).__init__(name, citation, is_pivot,
                                          is_ephemeral)
        self._is_nullable = None

    @property
    def rules(self):
        raise NotImplementedError

    def as_rule(self):
        if self.is_ephemeral and len(self.rules) == 1:
            return self.rules[0]
        else:
            return Rule((self,))

    def as_rules(self):
        if self.is_ephemeral:
            return self.rules
        else:
            return [self.as_rule()]

    def as_nonterminal(self):
        return self

    def is_nullable(self):
        if self._is_nullable is None:
            self._is_nullable = any(all(sym.is_nullable()
                                        for sym in rule.symbols)
                                    for rule in self.rules)
        return self._is_nullable


class SimpleNonterminal(Nonterminal):

    def __init__(self, name=None, citation=None, is_pivot=False,
                 is_ephemeral=None, rules=None):
        super(SimpleNonterminal, self).__init__(name, citation, is_pivot,
                                                is_ephemeral)
        self._rules = rules or []

    @property
    def rules(self):
        return self._rules

    def group(self):
        if self.is_ephemeral:
            return SimpleNonterminal(rules=self.rules, is_ephemeral=False)
        else:
            return self

    def set_rules_from(self, other):
        self._rules = other.rules

    rec = property(None, set_rules_from)        # used for recursive rules


class RepeatedNonterminal(Nonterminal):

    def __init__(self, name=None, citation=None, max_count=None, inner=None):
        super(RepeatedNonterminal, self).__init__(name, citation,
                                                  is_pivot=False,
                                                  is_ephemeral=False)
        self.max_count = max_count
        self.inner = inner
        self._rules = None

    def group(self):    # pragma: no cover
        return self

    @property
    def rules(self):
        if self._rules is None:
            r = subst([]) << empty
            if self.max_count is None:
                # No semantic actions here: this form is special-cased
                # in :func:`_find_results`, which needs the ``group()`` too.
                r = r | self * group(self.inner)
            elif self.max_count > 1:
                next_ = RepeatedNonterminal(max_count=self.max_count - 1,
                                            inner=self.inner)
                r = r | _continue_right_list << self.inner * next_
            else:
                r = r | _begin_list << self.inner
            self._rules = r.rules
        return self._rules


class Rule(object):

    """A rule according to which a nonterminal can be parsed.

    Consists of a tuple of symbols (terminals or nonterminals)
    + a semantic action that will be applied to the tuple of results
    to produce this rule's final result.
    """

    def __init__(self, symbols, action=None):
        self.symbols = symbols
        self.action = action

        # Lets us check if an Earley item is completed
        # with a single tuple lookup, without a bounds check.
        self.xsymbols = self.symbols + (None,)

    def __repr__(self):
        return '<Rule %r>' % (self.symbols,)

    def concat(self, other):
        if self.action is None and other.action is None:
            concat_action = None
        else:
            len1 = len(self.symbols)
            action1 = self.action
            action2 = other.action
            def concat_action(complain, nodes):
                nodes1 = nodes[:len1]
                if action1 is not None:
                    nodes1 = action1(complain, nodes1)
                nodes2 = nodes[len1:]
                if action2 is not None:
                    nodes2 = action2(complain, nodes2)
                return nodes1 + nodes2
        return Rule(self.symbols + other.symbols, concat_action)

    def wrap(self, func):
        inner_action = self.action
        def wrapper_action(complain, nodes):
            if inner_action is not None:
                nodes = inner_action(complain, nodes)
            nodes = tuple(node for node in nodes if node is not _SKIP)
            if getattr(func, 'with_complaints', False):
                r = func(complain, *nodes)
            else:
                r = func(*nodes)
            if r is _SKIP:
                return ()
            else:
                return (r,)
        return Rule(self.symbols, wrapper_action)


class _Skip(object):

    def __repr__(self):
        return '_SKIP'

_SKIP = _Skip()


empty = SimpleNonterminal(name=u'empty', rules=[Rule(())], is_ephemeral=True)


def char_range(min_, max_):
    """Create a terminal that accepts code points `min_` to `max_` inclusive.

    Both ends must be within Latin-1 (below 256).
    """
    bits = BitArray(length=256)
    for i in range(min_, max_ + 1):
        bits[i] = True
    return Terminal(bits=Bits(bits))

def char(value):
    """Create a terminal that accepts only the `value` code point."""
    return char_range(value, value)

def wide():
    """Create a terminal that accepts every code point above U+00FF."""
    return Terminal(wide=True)

def literal(s, case_sensitive=False):
    """Create a symbol that parses the `s` string."""
    if len(s) == 1:
        if case_sensitive:
            return char(ord(s))
        else:
            return char(ord(s.lower())) | char(ord(s.upper()))
    else:
        r = empty
        for c in s:
            r = r * literal(c, case_sensitive)
        return _join_args << r

def as_symbol(x):
    return x if isinstance(x, Symbol) else literal(x)


recursive = SimpleNonterminal


def skip(x):
    return _skip_args << as_symbol(x)

def group(x):
    return as_symbol(x).group()

def mark(symbol):
    """Wrap the symbol's result in a tuple where the first element is `symbol`.

    Used where the information about "which branch of the grammar was used"
    must be propagated upwards for further checks.
    """
    def mark_action(x):
        return (symbol, x)
    return mark_action << symbol


def maybe(inner, default=None):
    return inner | subst(default) << empty


def times(min_, max_, inner):
    inner = as_symbol(inner)
    if min_ == 0:
        return RepeatedNonterminal(max_count=max_, inner=inner)
    else:
        min_rule = empty
        for _ in range(min_):
            min_rule = min_rule * group(inner)
        min_rule = _as_list << min_rule
        if max_ == min_:
            return min_rule
        else:
            rest_rule = RepeatedNonterminal(max_count=(None if max_ is None
                                                       else max_ - min_),
                                            inner=inner)
            return min_rule + rest_rule

def many(inner):
    return times(0, None, inner)

def string(inner):
    return u''.join << many(inner)

def many1(inner):
    return times(1, None, inner)

def string1(inner):
    return u''.join << many1(inner)


class _AutoName(object):

    def __repr__(self):
        return '_AUTO'

_AUTO = _AutoName()


def named(name, citation=None, is_pivot=False):
    return (name, citation, is_pivot)

auto = named(_AUTO)
pivot = named(_AUTO, is_pivot=True)

def fill_names(scope, citation):
    """Process automatic names for all symbols in `scope`.

    When we write::

      foobar = literal('foo') | literal('bar')

    there is no way for `foobar` to know its own name (which is ``foobar``,
    important for error reporting), unless we post-process it with this
    function. It takes names from `scope` and writes them back into
    the symbols. This only happens for symbols sealed with :func:`auto`
    or :func:`pivot`.
    """
    for name, x in scope.items():
        if isinstance(x, Symbol) and x.name is _AUTO:
            x.name = name.rstrip('_').replace('_', '-')
            x.citation = citation


###############################################################################
# Functions that are useful as semantic actions in parsing rules.

def _skip_args(*_):
    return _SKIP

def _join_args(*args):
    return u''.join(args)

def subst(r):
    def substitute(*_):
        return r
    return substitute

def _as_list(*args):
    return list(args)

def _begin_list(*args):
    return [args if len(args) > 1 else args[0]]

def _continue_right_list(*args):
    list_ = args[-1]
    new_elem = args[:-1] if len(args) > 2 else args[0]
    return [new_elem] + list_

def can_complain(func):
    """Marks `func` (in-place) as capable of reporting notices.

    If so marked, `func` will be called
    with a special `complain` function as the first argument,
    which must be called to report a notice.
    """
    func.with_complaints = True
    return func


###############################################################################
# The actual Earley parsing algorithms.
# These are written in a sort of low-level, non-idiomatic Python
# to make them less terribly inefficient.


def _add_item(items, items_idx, items_set, symbol, rule, pos, start):
    # `items`, `items_idx` and `items_set` together constitute
    # an inventory of Earley items at a certain position of the input.
    # ``(symbol, rule, pos, start)`` is the item we want to append to it,
    # unless it's already present there.

    # `items` is the master list that is used for iterating over all items.
    # `items_idx` indexes items by their *next symbols*.
    # `items_set` holds "fingerprints" of all items, for presence checks.
    fingerprint = (id(symbol), id(rule), pos, start)

    if fingerprint not in items_set:
        items_set.add(fingerprint)
        items.append((symbol, rule, pos, start))
        items_idx.setdefault(rule.xsymbols[pos], []).append(
            (symbol, rule, pos, start))


def _inner_parse(data, target_symbol):
    length = len(data)
    (items, items_idx, items_set) = ([], {}, set())

    # Seed the initial items inventory with rules for `target_symbol`.
    chart = [(items, items_idx, items_set)]
    for rule in target_symbol.rules:
        _add_item(items, items_idx, items_set, target_symbol, rule, 0, 0)

    # Outer loop: over `data`.
    for i in range(length + 1):
        token = data[i : i + 1]

        # Initialize the items inventory for the next `i`,
        # because we will be adding to it on successful scans.
        chart.append(([], {}, set()))

        # Load the items inventory for the current `i`.
        (items, items_idx, items_set) = chart[i]
        if len(items) == 0:
            # No successful scans at the previous `i`.
            break

        # Inner loop: over items at the current `i`.
        j = 0
        while True:
            (symbol, rule, pos, start) = items[j]
            next_symbol = rule.xsymbols[pos]

            if next_symbol is None:
                # Earley completion:
                # copy items from this rule's start `i` to the current `i`,
                # advancing their rules by 1 position.
                (_, items_idx1, _) = chart[start]
                candidates = items_idx1.get(symbol, [])
                for (symbol1, rule1, pos1, start1) in candidates:
                    _add_item(items, items_idx, items_set,
                              symbol1, rule1, pos1 + 1, start1)

            elif isinstance(next_symbol, Nonterminal):
                # Skip over nullable symbols. See:
                # http://loup-vaillant.fr/tutorials/earley-parsing/empty-rules
                if next_symbol.is_nullable():
                    _add_item(items, items_idx, items_set,
                              symbol, rule, pos + 1, start)
                # Earley prediction:
                # add rules for `next_symbol` to the current `i`.
                for next_rule in next_symbol.rules:
                    _add_item(items, items_idx, items_set,
                              next_symbol, next_rule, 0, i)

            else:
                # `next_symbol` is a `Terminal`.
                # Earley scan:
                # copy this item to the next `i`,
                # advancing its rule by 1 position.
                if token and next_symbol.match(token):
                    (items1, items_idx1, items_set1) = chart[i + 1]
                    _add_item(items1, items_idx1, items_set1,
                              symbol, rule, pos + 1, start)

            j += 1
            if j == len(items):
                break

    # pylint: disable=undefined-loop-variable
    if i == length:             # Successfully parsed up to the end of input.
        rejections = []
        results = _find_results(data, target_symbol, chart, i, [], rejections)
        for start_i, _, result, complaints in results:
            # There may be multiple valid parses in case of ambiguities,
            # but we just want the first parse
            # that stretches to the beginning of the input.
            if start_i == 0:
                return (result, complaints)
        if rejections:
            # The input matches the grammar, but the semantic actions
            # rejected every way to parse it.
            raise rejections[0]

    raise _build_parse_error(data, target_symbol, chart)


def _find_results(data, symbol, chart, end_i, outer_parents, rejections):
    # The trivial base case is to find the parse result of a terminal.
    if isinstance(symbol, Terminal):
        if end_i > 0:
            token = data[end_i - 1 : end_i]
            if symbol.match(token):
                yield end_i - 1, None, token, []
        return

    # Iterate over all completed items for this nonterminal at this `i`.
    (_, items_idx, _) = chart[end_i]
    for item in items_idx.get(None, []):
        (sym, rule, _, start_i) = item
        if sym is not symbol:
            continue

        # Items already being processed further up the stack
        # would lead to unbounded recursion.
        if item in outer_parents:
            continue

        # Now we recursively collect the results
        # for each symbol of this rule, starting from the end.
        # There may be multiple completed items for each symbol,
        # but we need to find a combination that "fits together":
        # every next item starts where the previous item ends.

        # Instead of two mutually recursive functions,
        # which hit maximum recursion depth too soon,
        # we roll our own "stack" composed of "frames".
        # Every frame corresponds to one position (symbol) in the rule.
        # We start with one empty frame.
        frames = [(end_i, outer_parents + [item], None, None, None)]

        # `RepeatedNonterminal` can produce long strings (think of long
        # target URIs) that would exceed maximum recursion depth.
        # We unroll its left recursion, producing one frame *per repetition*.
        if isinstance(symbol, RepeatedNonterminal) and \
                rule.xsymbols[0] is symbol:
            n_nodes = None
            inner_symbol = rule.symbols[-1]
        else:
            n_nodes = len(rule.symbols)

        while True:
            (i, parents, rs, node, complaints) = frames.pop()
            if len(frames) == n_nodes:
                # We found a complete parse for this rule.
                # It starts at `i`. Is that what we expected?
                if i != start_i:
                    continue

                # Collect the raw results and complaints for each inner symbol.
                nodes = []
                all_complaints = []
                for (_, _, _, n, coms) in reversed(frames):
                    nodes.append(n)
                    all_complaints.extend(coms)

                # Then invoke the rule's semantic action,
                # which determines the final form of the parse result.
                # It can also add its own complaints, or reject the input.
                if rule.action is not None:
                    def complain(id_, **ctx):
                        # pylint: disable=cell-var-from-loop
                        all_complaints.append((id_, ctx))
                    try:
                        nodes = rule.action(complain, tuple(nodes))
                    except ValueError as e:
                        # This combination is not a valid parse,
                        # but there may be others.
                        rejections.append(
                            ParseError(position=start_i, expected=[],
                                       found=data[start_i:end_i], reason=e))
                        if len(frames) == 0:
                            break
                        continue
                nodes = tuple(n for n in nodes if n is not _SKIP)
                if len(nodes) == 0:
                    result = _SKIP
                elif len(nodes) == 1:
                    result = nodes[0]
                else:
                    result = nodes

                yield start_i, item, result, all_complaints

                if len(frames) == 0:
                    break

            else:
                # We haven't covered the entire rule yet. Keep working.
                if rs is None:
                    if n_nodes is not None:
                        inner_symbol = rule.symbols[-len(frames) - 1]
                    # Recursively get an iterator
                    # over possible results for this symbol.
                    rs = _find_results(data, inner_symbol, chart, i, parents,
                                       rejections)

                # Get the next result for this symbol.
                r = next(rs, None)
                if r is None:
                    # None left, so we must fall back (to ``pos + 1``)
                    # and try other results for the previous symbol.
                    if len(frames) > 0:
                        continue
                    else:
                        break

                new_i, new_item, new_node, new_complaints = r

                if new_i < i:
                    # We moved left in the input data,
                    # so there's no more danger of unbounded recursion.
                    new_parents = []
                elif n_nodes is None:
                    # No input consumed while unrolling a repetition:
                    # avoid this Earley item on our next iteration,
                    # otherwise we will be stuck at the same place forever.
                    new_parents = parents + [new_item]
                else:
                    # No input consumed, but we are limited to `n_nodes`.
                    new_parents = parents

                if n_nodes is None and new_i == start_i:
                    # A valid parse for this `RepeatedNonterminal`.
                    # No semantic actions to apply here.
                    nodes = [new_node]
                    all_complaints = new_complaints[:]
                    for (_, _, _, n, coms) in reversed(frames):
                        nodes.append(n)
                        all_complaints.extend(coms)
                    yield new_i, item, nodes, all_complaints

                if new_i >= start_i:
                    # Store the result and its iterator on our stack,
                    # so we can come back to it and get further results.
                    frames.append((i, parents, rs, new_node, new_complaints))
                    # Proceed to the next symbol (at ``pos - 1``)
                    # and try to find a result for that, ending at `new_i`.
                    frames.append((new_i, new_parents, None, None, None))
                else:
                    # Too far back in the input data.
                    # But we will try other results from this iterator.
                    frames.append((i, parents, rs, node, complaints))


def _build_parse_error(data, target_symbol, chart):
    # Find the last `i` that had some Earley items --
    # that is, the last `i` where we could still make sense of the input data.
    i, items = [(i, items)
                for (i, (items, _, _)) in enumerate(chart)
                if len(items) > 0][-1]
    found = data[i : i + 1]

    # What terminal symbols did we expect at that `i`?
    expected = OrderedDict()
    for (symbol, rule, pos, start) in items:
        next_symbol = rule.xsymbols[pos]
        if isinstance(next_symbol, Terminal):
            chars = format_chars(next_symbol.chars(),
                                 wide=next_symbol.wide)
            # And why did we expect it? As part of what nonterminals?
            expected.setdefault(chars, set()).update(
                _find_pivots(chart, symbol, start))

        if symbol is target_symbol and next_symbol is None:
            # A complete parse of `target_symbol`:
            # if the input data just stopped there, that would work, too.
            expected[u'end of data'] = None

    return ParseError(position=i, expected=[
        (option, sorted(symbols, key=_symbol_key) if symbols else symbols)
        for (option, symbols) in expected.items()
    ], found=found)


def _symbol_key(symbol):
    return u'%s' % symbol.name


def _find_pivots(chart, symbol, start, stack=None):
    if symbol.is_pivot:
        yield symbol
    else:
        stack = (stack or []) + [(symbol, start)]
        (_, items_idx, _) = chart[start]
        parents = items_idx.get(symbol, [])
        for (parent, _, _, parent_start) in parents:
            if (parent, parent_start) not in stack:
                for p in _find_pivots(chart, parent, parent_start, stack):
                    yield p
