from invidious_relay.main import run

run()
