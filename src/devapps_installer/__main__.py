# devapps_installer/__main__.py
import sys
import traceback

def main():
    try:
        from devapps_installer.main import run_cli
        sys.exit(run_cli())
    except Exception as e:
        print("Fatal error:", e)
        traceback.print_exc()
        sys.exit(2)

if __name__ == "__main__":
    main()
