from heavybag import HeavyBag


def make_bag(*elements, **counts):
    bag = HeavyBag(elements)
    for element, count in counts.items():
        bag.add_many(element, count)
    return bag


def drain(bag):
    return list(iter(bag))
