class ScriptedRandom:
    """Random source replaying a fixed list of integer draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def randint(self, high):
        value = self.draws.pop(0)
        if not 0 <= value < high:
            raise AssertionError(f"scripted draw {value} outside [0, {high})")
        return value

    def choice(self, seq):
        return seq[self.randint(len(seq))]

    def shuffle(self, seq):
        return list(seq)


class ConstantRandom:
    """Always draws 1: edits band 1 to 0 dB and never takes extra edits."""

    def randint(self, high):
        return 1

    def choice(self, seq):
        return seq[1]

    def shuffle(self, seq):
        return list(seq)


def edit(index, level_pos, extra=(1, 1, 1)):
    """Draws for one alternative: band index, level position, extra-edit rolls."""
    return [index, level_pos, *extra]
