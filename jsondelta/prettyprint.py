# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
from difflib import unified_diff
import hashlib
import pprint
import sys

import colorama
from jsonpointer import JsonPointerException

from .log import PatchFormatError
from .patch_format import PatchOp, validate_patch
from .pointers import resolve_path


# Indentation offset in pretty-print
IND = "  "

# Lists longer than this are printed item by item
MAXWIDTH = 78

PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    """Output options of the patch printer.

    Strings longer than `snip_length` characters are shortened to their
    head and a digest. None prints every string in full.
    """
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            snip_length=None,
            ):
        self.out = out
        self.use_color = use_color
        self.snip_length = snip_length

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def digest(s):
    return hashlib.md5(s.encode("utf8")).hexdigest()[:16]


def snip_string(s, config=DefaultConfig):
    "Shorten s to a single line when it exceeds config.snip_length."
    limit = config.snip_length
    if limit is None or len(s) <= limit:
        return s
    head = s[:limit].split('\n', 1)[0]
    return '%s...<snipped %d chars, md5=%s>' % (head, len(s) - len(head), digest(s))


def format_value(v, config=DefaultConfig):
    "Format a leaf for printing: strings as is (possibly snipped), pprint for the rest."
    if isinstance(v, str):
        return snip_string(v, config)
    return pprint.pformat(v)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value, config), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, prefix+IND, config)
    elif isinstance(v, list):
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = format_value(v, config)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = pprint.pformat(li)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(d):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_string_change(a, b, config=DefaultConfig):
    "Show a replaced string, as a line diff when multiline."
    ta = snip_string(a, config)
    tb = snip_string(b, config)
    if ta == a and tb == b and ("\n" in a or "\n" in b):
        # Skip the ---/+++ file header lines
        lines = list(unified_diff(a.splitlines(False), b.splitlines(False), lineterm='', n=2))[2:]
        for line in lines:
            if line.startswith('+'):
                config.out.write("%s%s%s\n" % (config.ADD, line[1:], config.RESET))
            elif line.startswith('-'):
                config.out.write("%s%s%s\n" % (config.REMOVE, line[1:], config.RESET))
            elif line.startswith(' '):
                config.out.write("%s%s%s\n" % (config.KEEP, line[1:], config.RESET))
            else:
                config.out.write(line + "\n")
    else:
        config.out.write("%s%s\n" % (config.REMOVE, ta))
        config.out.write("%s%s\n" % (config.ADD, tb))


_missing = object()

def _lookup(a, path):
    try:
        return resolve_path(a, path)
    except JsonPointerException:
        return _missing


def pretty_print_patch_entry(a, e, config=DefaultConfig):
    """Pretty-print a single patch entry.

    Old values are looked up in the document `a` the patch applies to.
    """
    op = e["op"]

    if op == PatchOp.ADD:
        pretty_print_patch_action("added", e["path"], config)
        pretty_print_value(e["value"], config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("deleted", e["path"], config)
        aval = _lookup(a, e["path"])
        if aval is not _missing:
            pretty_print_value(aval, config.REMOVE, config)

    elif op == PatchOp.REPLACE:
        aval = _lookup(a, e["path"])
        bval = e["value"]
        if aval is not _missing and type(aval) is not type(bval):
            typechange = " (type changed from %s to %s)" % (
                aval.__class__.__name__, bval.__class__.__name__)
        else:
            typechange = ""
        pretty_print_patch_action("replaced" + typechange, e["path"], config)
        if isinstance(aval, str) and isinstance(bval, str):
            pretty_print_string_change(aval, bval, config)
        else:
            if aval is not _missing:
                pretty_print_value(aval, config.REMOVE, config)
            pretty_print_value(bval, config.ADD, config)

    elif op == PatchOp.MOVE:
        pretty_print_patch_action("moved %s to" % e["from"], e["path"], config)
        aval = _lookup(a, e["from"])
        if aval is not _missing:
            pretty_print_value(aval, config.KEEP, config)

    else:
        raise PatchFormatError("Unknown patch op {}".format(op))

    config.out.write(PATCH_ENTRY_END + config.RESET)


def pretty_print_patch(a, patch, config=DefaultConfig):
    "Pretty-print a jsondelta patch computed against the document a."
    validate_patch(patch)
    for e in patch:
        pretty_print_patch_entry(a, e, config)
