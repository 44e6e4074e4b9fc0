"""
Pygments lexer for conditional comment sources

Highlights directive lines when displaying or reviewing a source that
carries //<tag> lines.

Token types:
- Comment.Special: The // marker opening a directive line
- Name.Tag: The tag right after the marker
- Whitespace: The optional single separating space
- Comment.Preproc: The payload exposed when the tag is active
- Comment.Single: Any other // comment
- Text: Everything else
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Comment, Name, Text, Whitespace


class EcomconLexer(RegexLexer):
    """
    Lexer for sources containing conditional comments

    Example:
        //debug log(x)

    Tokens:
        //    → Comment.Special
        debug → Name.Tag
        ' '   → Whitespace
        log(x) → Comment.Preproc
    """

    name = 'Ecomcon'
    aliases = ['ecomcon']
    filenames = []

    tokens = {
        'root': [
            # Directive line: marker, tag, optional single space, payload
            (r'^(//)([A-Za-z0-9_]+)( ?)([^\r\n]*)',
             bygroups(Comment.Special, Name.Tag, Whitespace, Comment.Preproc)),

            # Other line comments
            (r'//[^\r\n]*', Comment.Single),

            # Line terminators
            (r'\r\n|\r|\n', Whitespace),

            # Everything else is text
            (r'[^/\r\n]+', Text),
            (r'/', Text),
        ],
    }


def get_lexer() -> EcomconLexer:
    """
    Get the EcomconLexer instance

    Returns:
        EcomconLexer instance ready for use with Pygments
    """
    return EcomconLexer()
