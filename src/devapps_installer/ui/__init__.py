from .summary import print_plan, print_summary

__all__ = ["print_plan", "print_summary"]
