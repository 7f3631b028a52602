import tkinter as tk
from UIs.app import DataPrepApp


def main():
    try:
        print("Starting GUI...")
        root = tk.Tk()
        app = DataPrepApp(root)
        print("GUI ready. Entering mainloop...")
        root.mainloop()
    except Exception as e:
        print("[ERROR]", str(e))
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
