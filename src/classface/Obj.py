#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for every class and singleton built by Class().

    Instances expose only the members their class declared or inherited.
    """

    def super_(self, *args, **kwargs):
        """Super call on an object whose class has no dispatcher (singletons).

        Resolves nothing and returns None.
        """
        return None
