from pnorm_ball.app import main

if __name__ == "__main__":
    main()
