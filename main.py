from __future__ import annotations

import logging

from gui_min import ImageFolderPdfGUI


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    app = ImageFolderPdfGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
