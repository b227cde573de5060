from sample2info.core.sample2info import entry

if __name__ == "__main__": entry()  # noqa
