from soar.view.state import ViewSession
