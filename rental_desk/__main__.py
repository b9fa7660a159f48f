"""Module entry point for python -m rental_desk."""

from rental_desk.demo import main


if __name__ == "__main__":
    raise SystemExit(main())
