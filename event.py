class Event:
    def __init__(self, time, event_type, func, *args, priority=0):
        self.time = time
        self.type = event_type
        self.func = func
        self.args = args
        # equal times are resolved by priority (lorry id), lowest first
        self.priority = priority

    def __lt__(self, other):
        return (self.time, self.priority) < (other.time, other.priority)
