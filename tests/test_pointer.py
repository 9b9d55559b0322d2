from gamerie_cli.search import PointerListeners


def test_add_returns_remover():
    listeners = PointerListeners()
    seen = []

    remove = listeners.add(seen.append)
    assert seen.append in listeners
    assert len(listeners) == 1

    listeners.notify("target")
    remove()
    listeners.notify("later")

    assert seen == ["target"]
    assert seen.append not in listeners
    assert len(listeners) == 0


def test_remove_twice_is_harmless():
    listeners = PointerListeners()
    remove = listeners.add(print)

    remove()
    remove()

    assert len(listeners) == 0


def test_discard_unknown_listener():
    listeners = PointerListeners()
    listeners.add(print)

    listeners.discard(len)

    assert len(listeners) == 1


def test_notify_reaches_every_listener_in_order():
    listeners = PointerListeners()
    seen = []
    listeners.add(lambda target: seen.append(("a", target)))
    listeners.add(lambda target: seen.append(("b", target)))

    listeners.notify("row")

    assert seen == [("a", "row"), ("b", "row")]


def test_listener_may_unregister_during_notify():
    listeners = PointerListeners()
    seen = []

    def once(target):
        seen.append(("once", target))
        remove()

    remove = listeners.add(once)
    listeners.add(lambda target: seen.append(("always", target)))

    listeners.notify(1)
    listeners.notify(2)

    assert seen == [("once", 1), ("always", 1), ("always", 2)]
    assert once not in listeners
