"""Example of configuring the worker pool and searching an exponent range."""

from mersennepy import configure_search, search


def main():
    configure_search(
        workers=4,
        executor="process",
        verbose=False,
        time_job=True,
        progress_to_terminal=True,
    )

    report = search(2, 1279)
    print(report.mersenne_primes)


if __name__ == "__main__":
    main()
