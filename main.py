"""Run the salesreport demonstration without installing the console script."""

from salesreport.demo import run_demo

if __name__ == "__main__":
    run_demo()
