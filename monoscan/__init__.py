"""
Monoscan - Heuristic scanner for component-style classes.

Inspects C#-style source text one line at a time, providing:
- Detection of classes deriving from MonoBehaviour or NetworkBehaviour
- Enclosing base class lookup for any line
- Class body delimiting by brace-presence counting
- Method name enumeration and lifecycle message recognition

No syntax tree is built. Results are approximations tuned for
well-formatted code that is usually in the middle of being edited.
"""

__version__ = "0.1.0"
