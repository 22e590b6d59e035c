from item_tally.gui_viewers.app import main

if __name__ == "__main__":
    main()
