from maze_chase.viz.cli import main

main()
