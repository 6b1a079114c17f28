import argparse

#
#	Adapted from
#
#		https://guido.vonrudorff.de/2013/python-argparse-graceful-parameter-parsing/
#
#	Choices are matched ignoring case, and several spellings may map to
#	the same canonical value.  Anything else is refused.
#

class forgive_choice_list(object):
    def __init__(self, choices):
        # choices is either an iterable of values or a dict of
        # spelling -> canonical value
        if not isinstance(choices, dict):
            choices = dict((str(i), str(i)) for i in choices)

        self._choices = list(choices.keys())
        self._canonical = dict((k.lower(), v) for (k, v) in choices.items())

    def __contains__(self, item):
        return self.expand(item) is not None

    def __iter__(self):
        return iter(self._choices)

    def expand(self, item):
        if not isinstance(item, str):
            return None
        return self._canonical.get(item.lower())

class forgive_choice_action(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, self.choices.expand(values))
