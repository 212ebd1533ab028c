"""beepboop: wait until a host or URL responds, then beep."""
