from diablolike.core.runtime.main_loop import main


if __name__ == "__main__":
    main()
