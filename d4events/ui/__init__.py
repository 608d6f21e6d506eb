"""Desktop front-ends.

qt_window and tk_window each provide a CountdownWindow over a shared Board.
They are imported lazily by main so that one toolkit being missing does not
break the other.
"""
