# Format :: (major, minor, patch, build, 'status')
VERSION = (1, 0, 0, 0, 'released')
