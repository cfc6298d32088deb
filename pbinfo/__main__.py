from .pbinfo import main

main()
