# io/hooks.py


class NoopHooks:
    def plan_start(self, **_):
        pass

    def plan_order(self, **_):
        pass

    def segment_missing(self, **_):
        pass

    def placeholder_node(self, **_):
        pass

    def plan_end(self, **_):
        pass

    def path_invalid(self, **_):
        pass
