class FixedRandom:
    """random source that always picks the first empty cell and a fixed roll"""

    def __init__(self, roll=0.0):
        self.roll = roll
        self.choices = []

    def random(self):
        return self.roll

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[0]


def empty_4x4():
    return [[0] * 4 for _ in range(4)]
